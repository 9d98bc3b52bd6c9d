"""
Proxy and certificate settings taken from the process environment.

USE_PROXY=true turns proxy mode on, HTTPS_PROXY names the proxy and
CERT_BASE64_STRING optionally carries a base64 encoded CA certificate. The
certificate is decoded into a temporary file that the caller must remove
with cleanup_certificate() when the run is over.
"""

import base64
import binascii
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional


@dataclass(frozen=True)
class RuntimeEnvironment:
    use_proxy: bool = False
    proxy_url: Optional[str] = None
    cert_path: Optional[Path] = None


def decode_certificate(encoded: str, temp_dir: Optional[str] = None) -> Path:
    """
    Write the decoded certificate to a new temporary file and return its path.

    Undecodable input is not an error: the file is left empty and the package
    manager reports the TLS failure itself.
    """
    try:
        data = base64.b64decode(encoded)
    except binascii.Error:
        data = b""

    fd, path = tempfile.mkstemp(prefix="pkgwrap-", suffix=".crt", dir=temp_dir)
    with os.fdopen(fd, "wb") as f:
        f.write(data)
    return Path(path)


def load_environment(environ: Optional[Mapping[str, str]] = None, temp_dir: Optional[str] = None) -> RuntimeEnvironment:
    if environ is None:
        environ = os.environ

    if environ.get("USE_PROXY") != "true":
        return RuntimeEnvironment()

    proxy_url = environ.get("HTTPS_PROXY") or None
    cert_path = None
    encoded = environ.get("CERT_BASE64_STRING")
    if encoded:
        cert_path = decode_certificate(encoded, temp_dir)

    return RuntimeEnvironment(use_proxy=True, proxy_url=proxy_url, cert_path=cert_path)


def cleanup_certificate(env: Optional[RuntimeEnvironment]):
    """Remove the temporary certificate file, if one was created."""
    if env is None or env.cert_path is None:
        return
    try:
        env.cert_path.unlink()
    except OSError:
        pass
