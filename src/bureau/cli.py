"""bureau: the everyday helper command."""

import enum
import logging
import platform
import shutil
import sys

from rich.markup import escape

from . import ask
from .config import AFFINITY_GUIDE, DAVINCI_GUIDE, EXTENSIONS_LIST, Paths, read_version
from .console import BANNER, TAGLINE, Reporter, setup_logging
from .context import InstallContext
from .errors import CommandFailed
from .theme import ThemeMode, apply_theme

logger = logging.getLogger(__name__)

CREATIVE_APPS = ["gimp", "inkscape", "krita", "blender", "darktable", "scribus", "kdenlive", "obs-studio"]
EVERYDAY_APPS = ["google-chrome-stable"]
FONT_LIMIT = 80


class Command(enum.Enum):
    UPDATE = "update"
    APPS = "apps"
    FONTS = "fonts"
    THEME = "theme"
    ASK = "ask"
    AFFINITY = "affinity"
    DAVINCI = "davinci"
    EXTENSIONS = "extensions"
    INFO = "info"
    HELP = "help"
    UNKNOWN = None

    @classmethod
    def parse(cls, word):
        if word is None or word in ("help", "--help", "-h"):
            return cls.HELP
        for command in cls:
            if command.value is not None and command.value == word:
                return command
        return cls.UNKNOWN


HELP_ROWS = [
    ("bureau update", "Update Bureau & system packages"),
    ("bureau apps", "List installed creative apps"),
    ("bureau fonts", "List installed font families"),
    ("bureau theme dark", "Switch to dark mode"),
    ("bureau theme light", "Switch to light mode"),
    ('bureau ask "..."', "Ask Claude AI a question"),
    ("bureau affinity", "Show Affinity setup guide"),
    ("bureau davinci", "Show DaVinci Resolve setup guide"),
    ("bureau extensions", "Show recommended GNOME extensions"),
    ("bureau info", "Show system info"),
    ("bureau help", "Show this help"),
]


def show_help(ctx, args):
    console = ctx.ui.console
    console.print(BANNER, style="red", markup=False)
    console.print()
    console.print(f"  {TAGLINE}", style="bright_black")
    console.print()
    console.print("  [bold]Commands:[/bold]")
    for usage, description in HELP_ROWS:
        console.print(f"  [yellow]{usage:<20}[/yellow] {description}", highlight=False)
    console.print()
    return 0


def update(ctx, args):
    ctx.ui.console.print("[yellow]▸[/yellow] Updating system...")
    try:
        ctx.runner(["dnf", "upgrade", "-y", "--refresh"], sudo=True)
        ctx.runner(["flatpak", "update", "-y"])
    except CommandFailed as e:
        ctx.ui.warn(f"Update did not complete: {e}")
        return 0
    ctx.ui.console.print("[blue]✓[/blue] Bureau updated.")
    return 0


def is_installed(ctx, app) -> bool:
    if shutil.which(app):
        return True
    return ctx.runner(["rpm", "-q", app], check=False, capture=True).ok


def list_apps(ctx, args):
    console = ctx.ui.console
    console.print("[bold]Bureau Creative Suite:[/bold]")
    console.print()
    for app in CREATIVE_APPS:
        if is_installed(ctx, app):
            console.print(f"  [blue]✓[/blue] {app}")
        else:
            console.print(f"  [bright_black]✗[/bright_black] {app} [bright_black](not installed)[/bright_black]")
    console.print()
    console.print("[bold]Everyday Apps:[/bold]")
    console.print()
    for app in EVERYDAY_APPS:
        if shutil.which(app):
            console.print(f"  [blue]✓[/blue] {app}")
    flatpaks = ctx.runner(["flatpak", "list", "--app", "--columns=application,name"], check=False, capture=True)
    for line in flatpaks.stdout.splitlines():
        if line.strip():
            console.print(f"  [blue]✓[/blue] {escape(line.strip())}")
    return 0


def list_fonts(ctx, args):
    ctx.ui.console.print("[bold]Installed font families:[/bold]")
    result = ctx.runner(["fc-list", ":", "family"], check=False, capture=True)
    families = sorted({line.strip() for line in result.stdout.splitlines() if line.strip()})
    for family in families[:FONT_LIMIT]:
        ctx.ui.echo(family)
    ctx.ui.echo()
    ctx.ui.console.print(
        f"[bright_black](showing first {FONT_LIMIT} - run 'fc-list : family | sort -u' for all)[/bright_black]"
    )
    return 0


def theme(ctx, args):
    mode = ThemeMode.parse(args[0]) if args else None
    if mode is None:
        ctx.ui.echo("Usage: bureau theme [dark|light]")
        return 0
    try:
        apply_theme(mode, ctx.settings, ctx.paths)
    except CommandFailed as e:
        ctx.ui.warn(f"Could not switch theme: {e}")
        return 0
    ctx.ui.console.print(f"[blue]✓[/blue] Switched to {mode.value} mode")
    return 0


def ask_claude(ctx, args):
    return ask.run(args, ctx.ui, ctx.paths)


def show_document(ctx, name, markdown=False):
    path = ctx.paths.guide(name)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError:
        ctx.ui.warn(f"{path} not found - run bureau-install to generate it")
        return 0
    if markdown and ctx.ui.console.is_terminal:
        with ctx.ui.console.pager(styles=True):
            ctx.ui.markdown(text)
    else:
        ctx.ui.echo(text.rstrip("\n"))
    return 0


def affinity(ctx, args):
    return show_document(ctx, AFFINITY_GUIDE, markdown=True)


def davinci(ctx, args):
    return show_document(ctx, DAVINCI_GUIDE, markdown=True)


def extensions(ctx, args):
    return show_document(ctx, EXTENSIONS_LIST)


def info(ctx, args):
    if shutil.which("fastfetch"):
        ctx.runner(["fastfetch"], check=False)
        return 0
    ctx.ui.console.print(f"[bold]Bureau Linux[/bold] v{read_version(ctx.paths)}")
    ctx.ui.echo(" ".join(platform.uname()))
    return 0


HANDLERS = {
    Command.UPDATE: update,
    Command.APPS: list_apps,
    Command.FONTS: list_fonts,
    Command.THEME: theme,
    Command.ASK: ask_claude,
    Command.AFFINITY: affinity,
    Command.DAVINCI: davinci,
    Command.EXTENSIONS: extensions,
    Command.INFO: info,
    Command.HELP: show_help,
    Command.UNKNOWN: show_help,
}


def dispatch(ctx, argv) -> int:
    word = argv[0] if argv else None
    command = Command.parse(word)
    if command is Command.UNKNOWN:
        logger.debug("Unknown command %r, showing help", word)
    return HANDLERS[command](ctx, list(argv[1:]))


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    paths = Paths.from_env()
    setup_logging(paths)
    ctx = InstallContext(paths=paths, ui=Reporter())
    try:
        return dispatch(ctx, argv)
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
