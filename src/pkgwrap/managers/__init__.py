"""
Package manager wrappers.

Each wrapper knows its manager's system config file, how to add proxy
settings to a copy of it, and the command lines for install, remove and
update.
"""

from .apt import AptWrapper
from .base import ManagerWrapper
from .dnf import DnfWrapper
from .pacman import PacmanWrapper

WRAPPERS = {
    "pacman": PacmanWrapper,
    "dnf": DnfWrapper,
    "apt": AptWrapper,
}


def get_wrapper(name, config=None):
    """Instantiate the wrapper for a detected manager name."""
    return WRAPPERS[name](config=config)


__all__ = [
    "ManagerWrapper",
    "PacmanWrapper",
    "DnfWrapper",
    "AptWrapper",
    "WRAPPERS",
    "get_wrapper",
]
