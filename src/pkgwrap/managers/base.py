import os
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from ..cli import ACTIONS, InvocationRequest
from ..config import Config, get_config
from ..environment import RuntimeEnvironment
from ..errors import ConfigCopyError
from ..i18n import _
from ..ui import print_command, print_error, print_info

# Conventional shell status for "command not found"
EXIT_NOT_FOUND = 127


def find_section(lines: Sequence[str], name: str) -> Optional[range]:
    """
    Locate an INI style [name] section.

    Returns the range of body line indexes (header excluded), which is empty
    when the header is the last line, or None if there is no such section.
    """
    header = f"[{name}]"
    start = None
    for index, line in enumerate(lines):
        stripped = line.strip()
        if start is None:
            if stripped == header:
                start = index + 1
        elif stripped.startswith("[") and stripped.endswith("]"):
            return range(start, index)
    if start is None:
        return None
    return range(start, len(lines))


class ManagerWrapper:
    """
    Runs one package manager against a temporary copy of its system config.

    Subclasses name the manager, its config file and binary, and provide the
    proxy directives plus the command lines for each action.
    """

    name: str = ""
    binary: str = ""
    system_config: Path = Path("/dev/null")

    def __init__(self, config: Optional[Config] = None, system_config: Optional[Path] = None):
        self.config = config if config is not None else get_config()
        if system_config is not None:
            self.system_config = Path(system_config)
        self.temp_config: Optional[Path] = None

    # Config handling

    def copy_system_config(self) -> Path:
        fd, path = tempfile.mkstemp(
            prefix=f"pkgwrap-{self.name}-",
            suffix=self.system_config.suffix or ".conf",
            dir=self.config.get_temp_dir(),
        )
        os.close(fd)
        try:
            shutil.copyfile(self.system_config, path)
        except OSError as e:
            os.unlink(path)
            raise ConfigCopyError(self.system_config, e.strerror or str(e)) from e
        return Path(path)

    def proxy_directives(self, env: RuntimeEnvironment, timeout: int) -> List[str]:
        raise NotImplementedError

    def apply_proxy(self, text: str, directives: List[str]) -> str:
        """Place the directives into the config text. Default: append them."""
        if text and not text.endswith("\n"):
            text += "\n"
        return text + "\n".join(directives) + "\n"

    def prepare_config(self, env: RuntimeEnvironment, timeout: int) -> Path:
        """Copy the system config and add the proxy settings when proxy mode is on."""
        path = self.copy_system_config()
        if env.use_proxy:
            text = path.read_text(encoding="utf-8", errors="surrogateescape")
            text = self.apply_proxy(text, self.proxy_directives(env, timeout))
            path.write_text(text, encoding="utf-8", errors="surrogateescape")
        return path

    # Command handling

    def build_commands(self, action: str, packages: Sequence[str], config_path: Path) -> List[List[str]]:
        raise NotImplementedError

    def command_env(self) -> Optional[Dict[str, str]]:
        """Environment for the manager process, None to inherit ours."""
        return None

    def _should_show_command(self) -> bool:
        return self.config.get("ui", "show_command", False) or self.config.get("ui", "verbosity", 1) >= 2

    def execute(self, commands: List[List[str]]) -> int:
        """Run the commands in order, stopping at the first failure. Returns its raw status."""
        env = self.command_env()
        code = 0
        for cmd in commands:
            if self._should_show_command():
                print_command(cmd)
            try:
                code = subprocess.run(cmd, env=env, check=False).returncode
            except OSError as e:
                print_error(_("Could not run {}: {}").format(cmd[0], e.strerror or e))
                return EXIT_NOT_FOUND
            if code != 0:
                return code
        return code

    def run(self, request: InvocationRequest, env: RuntimeEnvironment) -> int:
        """
        Perform the request and return the manager's raw exit status.

        A config copy failure is reported here and returned as 1 without
        running the manager.
        """
        if request.action not in ACTIONS:
            print_error(_("Unknown action: {}").format(request.action))
            return 1

        try:
            self.temp_config = self.prepare_config(env, request.timeout)
        except ConfigCopyError as e:
            print_error(str(e))
            return 1

        if self.config.get("ui", "verbosity", 1) >= 2:
            print_info(_("Using temporary config {}").format(self.temp_config))

        try:
            commands = self.build_commands(request.action, list(request.packages), self.temp_config)
            return self.execute(commands)
        finally:
            if not self.config.get("files", "keep_temp_config", True):
                self.temp_config.unlink()
                self.temp_config = None
