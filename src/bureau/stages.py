import logging
from dataclasses import dataclass
from typing import Callable

from . import branding, gnome, system
from .errors import BureauError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Stage:
    name: str
    title: str
    run: Callable


# Order matters only where a later stage uses an earlier one's output
# (wallpapers before the background is pointed at them, Chrome before web apps).
STAGES = [
    Stage("update", "Updating system packages", system.update_system),
    Stage("repos", "Setting up additional repositories", system.setup_repos),
    Stage("core", "Installing core system packages", system.install_core),
    Stage("creative", "Installing creative suite", system.install_creative_suite),
    Stage("apps", "Installing everyday applications", system.install_apps),
    Stage("fonts", "Installing designer font collection", system.install_fonts),
    Stage("gnome", "Configuring GNOME desktop (Bauhaus theme)", gnome.configure_gnome),
    Stage("theme", "Installing Bureau Bauhaus theme", branding.install_theme),
    Stage("extensions", "Installing GNOME extensions for creative workflow", gnome.install_extensions),
    Stage("branding", "Installing Bureau wallpapers & branding", branding.install_branding),
    Stage("ai", "Setting up Claude AI integration", branding.install_ai),
    Stage("affinity", "Preparing Affinity via Bottles", branding.setup_affinity),
    Stage("terminal", "Configuring terminal & developer tools", branding.setup_terminal),
    Stage("tablet", "Setting up drawing tablet support", system.setup_tablet),
    Stage("colour", "Setting up colour management for design work", system.setup_colour),
    Stage("menu", "Installing Bureau helper commands", branding.install_menu),
    Stage("cleanup", "Final cleanup", system.cleanup),
]

STAGE_NAMES = [stage.name for stage in STAGES]


def select_stages(only=None):
    if not only:
        return list(STAGES)
    unknown = sorted(set(only) - set(STAGE_NAMES))
    if unknown:
        raise ValueError(f"Unknown stage(s): {', '.join(unknown)}")
    return [stage for stage in STAGES if stage.name in only]


def run_stages(ctx, stages):
    """Run each stage once, in order. Returns the names of stages that failed.

    A failing stage is reported and skipped; nothing is rolled back, and the
    next stage still runs. Re-running the installer converges.
    """
    failed = []
    for stage in stages:
        ctx.ui.step(stage.title)
        logger.info("Stage %s started", stage.name)
        try:
            stage.run(ctx)
        except (BureauError, OSError) as e:
            logger.exception("Stage %s failed", stage.name)
            ctx.ui.warn(f"{stage.title} did not complete: {e}")
            failed.append(stage.name)
        else:
            logger.info("Stage %s finished", stage.name)
    return failed
