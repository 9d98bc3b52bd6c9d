import os
from pathlib import Path
from typing import List

from .base import ManagerWrapper


class AptWrapper(ManagerWrapper):
    name = "apt"
    binary = "apt-get"
    system_config = Path("/etc/apt/apt.conf")

    def proxy_directives(self, env, timeout) -> List[str]:
        directives = []
        if env.proxy_url:
            directives.append(f'Acquire::https::proxy "{env.proxy_url}";')
        directives += [
            f'Acquire::http::Timeout "{timeout}";',
            f'Acquire::https::Timeout "{timeout}";',
        ]
        if env.cert_path:
            directives += [
                'Acquire::https::Verify-Peer "true";',
                f'Acquire::https::CaInfo "{env.cert_path}";',
            ]
        return directives

    def command_env(self):
        return dict(os.environ, DEBIAN_FRONTEND="noninteractive")

    def build_commands(self, action, packages, config_path) -> List[List[str]]:
        base = [self.binary, "-c", str(config_path)]
        if action == "install":
            return [base + ["install", "-y"] + packages]
        if action == "remove":
            return [base + ["remove", "-y"] + packages]
        # Index refresh and upgrade are separate apt-get runs
        return [base + ["update"], base + ["upgrade", "-y"]]
