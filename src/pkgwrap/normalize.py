from .i18n import _
from .ui import print_error

SUCCESS = 0
FAILURE = 1

KNOWN_MANAGERS = ("pacman", "dnf", "apt")


def normalize_return_code(code, manager):
    """
    Map a package manager's exit status onto 0 (success) or 1 (failure).

    pacman, dnf and apt all signal success with 0 only. pacman's exit 1 is
    also used for "nothing to do" in some situations, but it stays a failure
    here since it cannot be told apart from real errors.
    """
    if manager not in KNOWN_MANAGERS:
        print_error(_("Unsupported package manager: {}").format(manager))
        return FAILURE
    return SUCCESS if code == 0 else FAILURE
