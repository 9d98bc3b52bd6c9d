from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from .i18n import _

custom_theme = Theme({
    "info": "bold blue",
    "warning": "bold yellow",
    "error": "bold red",
    "success": "bold green",
    "command": "italic cyan",
    "pkg": "bold white",
    "header": "bold yellow",
})

console = Console(theme=custom_theme)
error_console = Console(theme=custom_theme, stderr=True)

# 0 quiet, 1 normal, 2 verbose
verbosity = 1


def configure(force_colors=False, level=1):
    """Apply the [ui] settings: forced colors and the verbosity level."""
    global console, error_console, verbosity
    verbosity = level
    if force_colors:
        console = Console(theme=custom_theme, force_terminal=True)
        error_console = Console(theme=custom_theme, stderr=True, force_terminal=True)


def print_info(text):
    """Informational output, silenced at verbosity 0. Warnings and errors always show."""
    if verbosity > 0:
        console.print(text)


def print_warning(text):
    """Print a warning line to stderr: [WARN] <text>."""
    error_console.print(f"[warning]\\[WARN][/warning] {escape(text)}")


def print_error(text):
    """Print a diagnostic line to stderr: [ERROR] <text>."""
    error_console.print(f"[error]\\[ERROR][/error] {escape(text)}")


def print_command(cmd):
    console.print(f"[command]{escape(' '.join(str(part) for part in cmd))}[/command]")


def show_help():
    from . import __version__

    text = Text()
    text.append(f"pkgwrap {__version__}\n", style="bold")
    text.append(_("Usage: pkgwrap [--install PKGS | --remove PKGS | --system-update] [--timeout SECONDS]\n\n"), style="header")
    text.append(_("pkgwrap runs pacman, dnf or apt (whichever is found first: dnf, pacman, apt)\n"))
    text.append(_("with an optional HTTPS proxy and CA certificate, and reports 0 on success,\n"))
    text.append(_("1 on failure and 2 when no supported package manager is installed.\n\n"))

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Option", style="success")
    table.add_column("Description")

    options = [
        ("--install PKGS", _("install the comma-separated packages")),
        ("--remove PKGS", _("remove the comma-separated packages")),
        ("--system-update", _("refresh the package index and upgrade everything")),
        ("--timeout SECONDS", _("network timeout used in proxy mode (default 600)")),
        ("-v, --version", _("show version")),
        ("-h, --help", _("show this help")),
    ]
    for opt, desc in options:
        table.add_row(opt, desc)

    env_table = Table(show_header=False, box=None, padding=(0, 2))
    env_table.add_column("Variable", style="command")
    env_table.add_column("Description")
    env_table.add_row("USE_PROXY", _("set to \"true\" to enable proxy mode"))
    env_table.add_row("HTTPS_PROXY", _("proxy URL used in proxy mode"))
    env_table.add_row("CERT_BASE64_STRING", _("base64 encoded CA certificate for the proxy"))
    env_table.add_row("PKGWRAP_CONFIG", _("settings file (default /etc/pkgwrap/config.toml)"))

    console.print(text)
    console.print(_("[bold]Options:[/bold]"))
    console.print(table)
    console.print(_("\n[bold]Environment:[/bold]"))
    console.print(env_table)
