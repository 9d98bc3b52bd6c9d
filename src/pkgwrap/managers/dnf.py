from pathlib import Path
from typing import List

from .base import ManagerWrapper, find_section

ACTION_ARGS = {
    "install": ["install", "-y"],
    "remove": ["remove", "-y"],
    "update": ["upgrade", "--refresh", "-y"],
}


class DnfWrapper(ManagerWrapper):
    name = "dnf"
    binary = "dnf"
    system_config = Path("/etc/dnf/dnf.conf")

    def proxy_directives(self, env, timeout) -> List[str]:
        directives = []
        if env.proxy_url:
            directives.append(f"proxy={env.proxy_url}")
        directives.append(f"timeout={timeout}")
        if env.cert_path:
            directives += ["sslverify=1", f"sslcacert={env.cert_path}"]
        return directives

    def apply_proxy(self, text, directives):
        lines = text.splitlines()
        section = find_section(lines, "main")
        if section is None:
            return super().apply_proxy(text, directives)

        # Options we set replace any earlier value in [main]
        keys = {directive.split("=", 1)[0] for directive in directives}
        body = [
            line for line in lines[section.start:section.stop]
            if line.split("=", 1)[0].strip() not in keys
        ]
        while body and not body[-1].strip():
            body.pop()
        trailer = [""] if section.stop < len(lines) else []

        lines = lines[:section.start] + body + directives + trailer + lines[section.stop:]
        return "\n".join(lines) + "\n"

    def build_commands(self, action, packages, config_path) -> List[List[str]]:
        cmd = [self.binary, "-c", str(config_path)] + ACTION_ARGS[action]
        if action != "update":
            cmd += packages
        return [cmd]
