"""bureau-uninstall: removes Bureau customisations but leaves installed apps intact."""

import argparse
import logging
import shutil
import sys

from .assets import STARSHIP_INIT, WEB_APPS
from .config import Paths
from .console import Reporter, setup_logging
from .context import InstallContext
from .credentials import ENV_VAR
from .files import remove_block, remove_lines_containing
from .gnome import BACKGROUND, INTERFACE, RESET_INTERFACE_KEYS
from .runner import Runner

logger = logging.getLogger(__name__)

REMOVES = [
    "Bureau theme (GTK CSS overrides)",
    "Bureau wallpapers",
    "Bureau config files (including a saved API key)",
    "Starship prompt config",
    "Bureau aliases from .bashrc",
    "Saved API key exports from .bashrc and .zshrc",
    "Bureau web app shortcuts",
]

KEEPS = [
    "Installed apps (GIMP, Inkscape, Chrome, etc.)",
    "Installed fonts",
    "GNOME extensions",
    "Flatpak apps",
]


def _unlink(path):
    try:
        path.unlink()
    except FileNotFoundError:
        pass


def remove_theme(ctx):
    _unlink(ctx.paths.gtk4_css)
    _unlink(ctx.paths.gtk3_css)
    settings = ctx.settings
    for key in RESET_INTERFACE_KEYS:
        settings.reset(INTERFACE, key)


def remove_wallpapers(ctx):
    shutil.rmtree(ctx.paths.wallpaper_dir, ignore_errors=True)
    settings = ctx.settings
    settings.reset(BACKGROUND, "picture-uri")
    settings.reset(BACKGROUND, "picture-uri-dark")


def remove_config(ctx):
    shutil.rmtree(ctx.paths.config_dir, ignore_errors=True)


def remove_starship(ctx):
    _unlink(ctx.paths.starship_config)


def clean_shell_rc(ctx):
    bashrc = ctx.paths.bashrc
    if bashrc.exists():
        remove_block(bashrc)
        remove_lines_containing(bashrc, STARSHIP_INIT)
    # The saved API key is exported from every rc file it was written to
    for rc in (bashrc, ctx.paths.zshrc):
        remove_lines_containing(rc, ENV_VAR)


def remove_desktop_entries(ctx):
    for file_id, *_ in WEB_APPS:
        _unlink(ctx.paths.applications_dir / f"{file_id}.desktop")


STEPS = [
    ("Removing Bureau theme...", "Theme reset to defaults", remove_theme),
    ("Removing Bureau wallpapers...", "Wallpapers removed", remove_wallpapers),
    ("Removing Bureau config...", "Config removed", remove_config),
    ("Removing Starship config...", "Starship config removed", remove_starship),
    ("Cleaning shell startup files...", ".bashrc and .zshrc cleaned", clean_shell_rc),
    ("Removing Bureau desktop entries...", "Desktop entries removed", remove_desktop_entries),
]


def uninstall(ctx) -> int:
    ui = ctx.ui
    ui.console.print("  Bureau Uninstaller", style="red")
    ui.echo()
    ui.console.print("[yellow]This will remove:[/yellow]")
    for item in REMOVES:
        ui.echo(f"  - {item}")
    ui.echo()
    ui.console.print("[yellow]This will NOT remove:[/yellow]")
    for item in KEEPS:
        ui.echo(f"  - {item}")

    if not ui.confirm("Continue with uninstall?", default=False):
        ui.echo("Cancelled.")
        return 0

    for title, done, step in STEPS:
        ui.step(title)
        try:
            step(ctx)
        except OSError as e:
            logger.exception("Uninstall step failed: %s", title)
            ui.warn(f"{title} failed: {e}")
            continue
        ui.success(done)

    ui.echo()
    ui.console.print("[blue]Bureau has been uninstalled.[/blue]")
    ui.echo("Installed apps and fonts remain - remove them manually if needed.")
    ui.echo("Restart your session to fully apply changes.")
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="bureau-uninstall", description=__doc__)
    parser.add_argument("-y", "--yes", action="store_true", help="do not ask for confirmation")
    parser.add_argument("--verbose", action="store_true", help="log to stderr")
    args = parser.parse_args(argv)

    paths = Paths.from_env()
    # Logging goes to stderr only: the log file lives in the dir being removed
    setup_logging(None, verbose=args.verbose)
    ctx = InstallContext(paths=paths, runner=Runner(), ui=Reporter(assume_yes=args.yes))
    try:
        return uninstall(ctx)
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
