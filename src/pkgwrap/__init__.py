"""pkgwrap - install, remove and update packages through pacman, dnf or apt."""

__version__ = "0.3.0"
