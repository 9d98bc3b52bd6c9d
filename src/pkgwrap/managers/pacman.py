from pathlib import Path
from typing import List

from .base import ManagerWrapper, find_section

ACTION_FLAGS = {
    "install": ["-S", "--noconfirm"],
    "remove": ["-R", "--noconfirm"],
    "update": ["-Syu", "--noconfirm"],
}


class PacmanWrapper(ManagerWrapper):
    name = "pacman"
    binary = "pacman"
    system_config = Path("/etc/pacman.conf")

    def xfer_command(self, env, timeout) -> str:
        """The download command pacman runs for each file (%u url, %o output)."""
        parts = [self.config.get("network", "xfer_client", "/usr/bin/curl")]
        if env.proxy_url:
            parts += ["--proxy", env.proxy_url]
        if env.cert_path:
            parts += ["--cacert", str(env.cert_path)]
        parts += [
            "--retry", str(self.config.get("network", "retries", 3)),
            "--retry-delay", str(self.config.get("network", "retry_delay", 3)),
            "--connect-timeout", str(timeout),
            "-L", "-C", "-", "-f", "-o", "%o", "%u",
        ]
        return " ".join(parts)

    def proxy_directives(self, env, timeout) -> List[str]:
        return [f"XferCommand = {self.xfer_command(env, timeout)}"]

    def apply_proxy(self, text, directives):
        lines = text.splitlines()
        section = find_section(lines, "options")
        if section is None:
            return super().apply_proxy(text, ["[options]"] + directives)

        # Only one XferCommand may be active
        for index in section:
            if lines[index].strip().startswith("XferCommand"):
                lines[index] = "#" + lines[index]

        lines[section.start:section.start] = directives
        return "\n".join(lines) + "\n"

    def build_commands(self, action, packages, config_path) -> List[List[str]]:
        cmd = [self.binary, "--config", str(config_path)] + ACTION_FLAGS[action]
        if action != "update":
            cmd += packages
        return [cmd]
