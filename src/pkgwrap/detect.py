import shutil
from typing import Optional

# Probe order is fixed: the first binary found decides the manager.
MANAGERS = ("dnf", "pacman", "apt")


def detect_manager() -> Optional[str]:
    """Return "dnf", "pacman" or "apt" for the first manager on PATH, else None."""
    for name in MANAGERS:
        if shutil.which(name):
            return name
    return None
