import logging
from dataclasses import dataclass, field

from .config import Paths
from .console import Reporter
from .files import write_file
from .runner import Runner

logger = logging.getLogger(__name__)


@dataclass
class InstallContext:
    """What every stage and subcommand handler gets handed."""

    paths: Paths
    runner: Runner = field(default_factory=Runner)
    ui: Reporter = field(default_factory=Reporter)

    @property
    def dry_run(self) -> bool:
        return getattr(self.runner, "dry_run", False)

    @property
    def settings(self):
        from .gnome import GSettings
        return GSettings(self.runner)

    def write(self, path, text, mode=None):
        if self.dry_run:
            logger.info("[dry-run] write %s", path)
            return path
        return write_file(path, text, mode=mode)
