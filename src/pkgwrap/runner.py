from .cli import InvocationRequest
from .config import Config
from .detect import MANAGERS, detect_manager
from .environment import RuntimeEnvironment
from .i18n import _
from .logger import log_action
from .managers import get_wrapper
from .normalize import normalize_return_code
from .ui import print_error, print_info, print_warning

EXIT_NO_MANAGER = 2


def run(request: InvocationRequest, env: RuntimeEnvironment, config: Config) -> int:
    """Detect the package manager, run the request through it and return 0, 1 or 2."""
    manager = detect_manager()
    if manager is None:
        print_error(_("No supported package manager found (looked for {})").format(", ".join(MANAGERS)))
        return EXIT_NO_MANAGER

    if env.use_proxy and not env.proxy_url:
        print_warning(_("USE_PROXY is true but HTTPS_PROXY is not set"))

    print_info(_("Using {}").format(manager))
    wrapper = get_wrapper(manager, config)
    raw_code = wrapper.run(request, env)
    status = normalize_return_code(raw_code, wrapper.name)

    log_action(manager, request.action, request.packages, status, temp_config=wrapper.temp_config)
    return status
