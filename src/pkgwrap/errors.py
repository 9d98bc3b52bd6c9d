class PkgwrapError(Exception):
    """Base class for errors raised by pkgwrap."""


class UsageError(PkgwrapError):
    """Bad command line."""


class ConfigCopyError(PkgwrapError):
    """The package manager's system config could not be copied."""

    def __init__(self, source, reason):
        self.source = source
        self.reason = reason
        super().__init__(f"Could not copy {source}: {reason}")
