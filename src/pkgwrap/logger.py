import getpass
import os
import time
from pathlib import Path

SYSTEM_LOG_PATHS = (
    Path("/var/log/pkgwrap.log"),
    Path("/run/log/pkgwrap.log"),
)


def get_log_path():
    """
    Determines the history log path based on permissions and existence.
    Priorities:
    1. /var/log/pkgwrap.log (if writable or running as root)
    2. /run/log/pkgwrap.log (if writable)
    3. User local state: $XDG_STATE_HOME/pkgwrap/history.log
    Returns None when no location is usable.
    """
    uid = os.getuid()

    for path in SYSTEM_LOG_PATHS:
        if not path.parent.exists():
            continue
        if uid == 0:
            return path
        if path.exists() and os.access(path, os.W_OK):
            return path
        if not path.exists() and os.access(path.parent, os.W_OK):
            return path

    xdg_state = os.environ.get("XDG_STATE_HOME")
    if xdg_state:
        base_dir = Path(xdg_state)
    else:
        base_dir = Path.home() / ".local" / "state"

    log_dir = base_dir / "pkgwrap"
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        return None
    return log_dir / "history.log"


def format_entry(manager, action, packages, status, temp_config=None):
    """
    Format: YYYY-MM-DD HH:MM:SS [USER] pkgwrap <manager> <action> <packages> -> <status>
    The temporary config path is appended when it was kept on disk.
    """
    timestamp = time.strftime("%Y-%m-%d %H:%M:%S")

    # Get real user if running via sudo
    sudo_user = os.environ.get("SUDO_USER")
    current_user = getpass.getuser()
    if sudo_user and sudo_user != current_user:
        user_str = f"{sudo_user}(as {current_user})"
    else:
        user_str = current_user

    entry = f"{timestamp} [{user_str}] pkgwrap {manager} {action}"
    if packages:
        entry += " " + " ".join(packages)
    entry += f" -> {status}"
    if temp_config:
        entry += f" (config: {temp_config})"
    return entry + "\n"


def log_action(manager, action, packages, status, temp_config=None):
    """Append one line to the history log. Failing to log never fails the run."""
    log_path = get_log_path()
    if not log_path:
        return

    entry = format_entry(manager, action, packages, status, temp_config)
    try:
        with open(log_path, "a", encoding="utf-8") as f:
            f.write(entry)
    except OSError:
        pass
