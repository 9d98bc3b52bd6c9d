"""
Translation support for pkgwrap messages.

Catalogs are looked up under <prefix>/share/locale (installed) and then the
repository's locales/ directory. Without either, messages stay in English.
"""

import gettext
import os
import sys
from pathlib import Path

_domain = "pkgwrap"


def _get_locale_dir():
    # Explicit override, mostly useful for packagers
    custom = os.environ.get("PKGWRAP_LOCALE_DIR")
    if custom and Path(custom).is_dir():
        return str(custom)

    system_locale = Path(sys.prefix) / "share" / "locale"
    if system_locale.exists():
        return str(system_locale)

    repo_locale = Path(__file__).parent.parent.parent / "locales"
    if repo_locale.exists():
        return str(repo_locale)

    return None


_locale_dir = _get_locale_dir()

if _locale_dir:
    _ = gettext.translation(_domain, localedir=_locale_dir, fallback=True).gettext
else:
    def _(msg):
        return msg


__all__ = ["_"]
