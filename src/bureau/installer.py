"""bureau-install: turns a stock Fedora GNOME desktop into Bureau."""

import argparse
import logging
import sys

from .config import BUREAU_VERSION, Paths
from .console import Reporter, setup_logging
from .context import InstallContext
from .errors import PreflightError
from .preflight import run_preflight
from .runner import Runner
from .stages import STAGES, run_stages, select_stages

logger = logging.getLogger(__name__)

INTRO = (
    "This will install Bureau on your Fedora system. "
    "It will install apps, themes, fonts, and configure GNOME."
)


def post_install(ui, failed):
    ui.console.print()
    ui.console.print("  ==============================================", style="red")
    ui.console.print("   Bureau is installed. Welcome, creator.", style="red")
    ui.console.print("  ==============================================", style="red")
    ui.console.print()
    ui.console.print("  [bold]Quick Start:[/bold]")
    ui.console.print("  [yellow]bureau help[/yellow]           - See all Bureau commands")
    ui.console.print('  [yellow]bureau ask "..."[/yellow]      - Ask Claude AI anything')
    ui.console.print("  [yellow]bureau apps[/yellow]           - See your creative toolkit")
    ui.console.print("  [yellow]bureau theme dark[/yellow]     - Switch themes")
    ui.console.print("  [yellow]bureau affinity[/yellow]       - Set up Affinity apps")
    ui.console.print()
    ui.console.print("  [bold]Creative Shortcuts:[/bold]")
    ui.console.print("  [bright_black]design[/bright_black]  → Inkscape    [bright_black]paint[/bright_black]   → Krita")
    ui.console.print("  [bright_black]photo[/bright_black]   → GIMP        [bright_black]raw[/bright_black]     → Darktable")
    ui.console.print("  [bright_black]render[/bright_black]  → Blender     [bright_black]publish[/bright_black] → Scribus")
    ui.console.print("  [bright_black]edit[/bright_black]    → Kdenlive    [bright_black]ask[/bright_black]     → Claude AI")
    ui.console.print()
    ui.console.print("  [bold]Next Steps:[/bold]")
    ui.console.print("  1. Open [yellow]Extension Manager[/yellow] and install recommended extensions")
    ui.console.print("  2. Run [yellow]bureau affinity[/yellow] if you want to set up Affinity apps")
    ui.console.print("  3. Set your [yellow]ANTHROPIC_API_KEY[/yellow] for Claude terminal integration")
    ui.console.print("     (or just run [yellow]bureau-ask[/yellow] and it will prompt you)")
    ui.console.print()
    if failed:
        ui.warn(f"Some stages did not complete: {', '.join(failed)}")
        ui.substep("Re-run bureau-install (or bureau-install --only <stage>) to retry them")
        ui.console.print()
    ui.console.print("  [bright_black]Bauhaus believed form follows function.[/bright_black]")
    ui.console.print("  [bright_black]Bureau believes your OS should follow your creativity.[/bright_black]")
    ui.console.print()
    ui.console.print("  [bold]Restart recommended[/bold] to apply all theme changes.")
    ui.console.print()


def install(ctx, stages=None, preflight=run_preflight) -> int:
    """Confirm, check the machine, run the stages. Returns the process exit code."""
    ui = ctx.ui
    ui.banner(BUREAU_VERSION)

    if not ui.confirm(INTRO):
        ui.echo("Installation cancelled.")
        return 0
    ui.echo()

    ui.step("Running pre-flight checks")
    try:
        preflight(ctx)
    except PreflightError as e:
        logger.error("Pre-flight failed: %s", e)
        ui.warn(f"Aborting: {e}")
        return 1

    failed = run_stages(ctx, STAGES if stages is None else stages)
    post_install(ui, failed)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(
        prog="bureau-install",
        description="Beautiful, opinionated Fedora for creatives and designers.",
    )
    parser.add_argument("-y", "--yes", action="store_true", help="answer yes to every confirmation")
    parser.add_argument("--dry-run", action="store_true", help="print commands instead of running them")
    parser.add_argument("--only", action="append", metavar="STAGE", help="run only this stage (repeatable)")
    parser.add_argument("--list-stages", action="store_true", help="list stages in run order and exit")
    parser.add_argument("--verbose", action="store_true", help="log to stderr")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    paths = Paths.from_env()
    setup_logging(paths, verbose=args.verbose or args.dry_run)

    ui = Reporter(assume_yes=args.yes)
    if args.list_stages:
        for stage in STAGES:
            ui.echo(f"{stage.name:<12} {stage.title}")
        return 0

    try:
        stages = select_stages(args.only)
    except ValueError as e:
        ui.warn(str(e))
        return 2

    ctx = InstallContext(paths=paths, runner=Runner(dry_run=args.dry_run), ui=ui)
    try:
        return install(ctx, stages)
    except KeyboardInterrupt:
        ui.warn("Interrupted.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
