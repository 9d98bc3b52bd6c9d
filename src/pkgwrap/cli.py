import argparse
import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .errors import UsageError
from .i18n import _

ACTIONS = ("install", "remove", "update")
DEFAULT_TIMEOUT = 600


@dataclass(frozen=True)
class InvocationRequest:
    action: str
    packages: tuple
    timeout: Optional[int] = DEFAULT_TIMEOUT


def split_packages(csv: str) -> List[str]:
    """Split a comma-separated package list, dropping empty entries."""
    return [name.strip() for name in csv.split(",") if name.strip()]


class _ActionArg(argparse.Action):
    """Records the action together with its package list; the last one given wins."""

    def __call__(self, parser, namespace, values, option_string=None):
        namespace.action = self.const
        namespace.packages = split_packages(values) if isinstance(values, str) else []


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="pkgwrap",
        description="Proxy-aware wrapper for pacman, dnf and apt",
        add_help=False,  # Help is rendered by ui.show_help
        allow_abbrev=False,
    )
    parser.add_argument("--install", action=_ActionArg, const="install", metavar="PKGS")
    parser.add_argument("--remove", action=_ActionArg, const="remove", metavar="PKGS")
    parser.add_argument("--system-update", action=_ActionArg, const="update", nargs=0)
    parser.add_argument("--timeout", type=int, default=None, metavar="SECONDS")
    parser.add_argument("-v", "--version", action="store_true")
    parser.add_argument("-h", "--help", action="store_true")
    parser.set_defaults(action=None, packages=[])
    return parser


def parse_args(argv: Optional[Sequence[str]] = None, default_timeout: Optional[int] = DEFAULT_TIMEOUT) -> InvocationRequest:
    """
    Parse the command line into an InvocationRequest.

    Raises UsageError for unknown flags, malformed values, a timeout that
    is not positive, a missing action or an empty package list. --help and --version print and exit 0.
    """
    if argv is None:
        argv = sys.argv[1:]

    args = build_parser().parse_args(list(argv))

    if args.version:
        from . import __version__
        print(f"pkgwrap {__version__}")
        sys.exit(0)

    if args.help:
        from .ui import show_help
        show_help()
        sys.exit(0)

    if args.action is None:
        raise UsageError(_("no action given (use --install, --remove or --system-update)"))

    timeout = default_timeout if args.timeout is None else args.timeout
    if timeout is not None and timeout <= 0:
        raise UsageError(_("--timeout must be a positive number of seconds"))

    # --system-update takes no package list
    packages = tuple(args.packages) if args.action != "update" else ()
    if args.action != "update" and not packages:
        raise UsageError(_("--{} needs at least one package name").format(args.action))
    return InvocationRequest(action=args.action, packages=packages, timeout=timeout)
