import dataclasses
import os
import sys

from .cli import parse_args
from .config import get_config
from .environment import cleanup_certificate, load_environment
from .errors import UsageError
from .i18n import _
from .runner import run
from .ui import configure, print_error


def _main(argv=None):
    try:
        request = parse_args(argv, default_timeout=None)
    except UsageError as e:
        print_error(str(e))
        print_error(_("Try 'pkgwrap --help' for more information."))
        return 1

    # Nothing else is read or written before this check
    if os.getuid() != 0:
        print_error(_("pkgwrap must be run as root"))
        return 1

    env = None
    try:
        config = get_config()
        configure(config.get("ui", "force_colors", False), config.get("ui", "verbosity", 1))
        if request.timeout is None:
            request = dataclasses.replace(request, timeout=config.get("network", "timeout"))

        env = load_environment(temp_dir=config.get_temp_dir())
        return run(request, env, config)
    except KeyboardInterrupt:
        print(_("Aborted."))
        return 1
    except Exception as e:
        print_error(str(e))
        return 1
    finally:
        cleanup_certificate(env)


def main(argv=None):
    sys.exit(_main(argv))


if __name__ == "__main__":
    main()
