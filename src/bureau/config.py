import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from . import __version__

logger = logging.getLogger(__name__)

BUREAU_VERSION = __version__

CONFIG_FILE_NAME = "config.json"
LOG_FILE_NAME = "bureau.log"
VERSION_FILE_NAME = "version"

WALLPAPER_DARK = "bureau-bauhaus-dark.png"
WALLPAPER_LIGHT = "bureau-bauhaus-light.png"
WALLPAPER_MINIMAL = "bureau-minimal-dark.png"
WALLPAPER_GRID = "bureau-grid-dark.png"

AFFINITY_GUIDE = "affinity-setup.md"
DAVINCI_GUIDE = "davinci-resolve-setup.md"
EXTENSIONS_LIST = "recommended-extensions.txt"


@dataclass(frozen=True)
class Paths:
    """Every file location Bureau reads or writes, rooted at one home dir."""

    home: Path
    config_home: Path
    data_home: Path

    @classmethod
    def from_env(cls, env=None, home=None):
        env = os.environ if env is None else env
        home = Path(home) if home is not None else Path(env.get("HOME") or Path.home())
        config_home = Path(env["XDG_CONFIG_HOME"]) if env.get("XDG_CONFIG_HOME") else home / ".config"
        data_home = Path(env["XDG_DATA_HOME"]) if env.get("XDG_DATA_HOME") else home / ".local" / "share"
        return cls(home=home, config_home=config_home, data_home=data_home)

    @property
    def config_dir(self) -> Path:
        return self.config_home / "bureau"

    @property
    def wallpaper_dir(self) -> Path:
        return self.data_home / "backgrounds" / "bureau"

    @property
    def applications_dir(self) -> Path:
        return self.data_home / "applications"

    @property
    def font_dir(self) -> Path:
        return self.data_home / "fonts" / "bureau"

    @property
    def gtk4_css(self) -> Path:
        return self.config_home / "gtk-4.0" / "gtk.css"

    @property
    def gtk3_css(self) -> Path:
        return self.config_home / "gtk-3.0" / "gtk.css"

    @property
    def starship_config(self) -> Path:
        return self.config_home / "starship.toml"

    @property
    def bashrc(self) -> Path:
        return self.home / ".bashrc"

    @property
    def zshrc(self) -> Path:
        return self.home / ".zshrc"

    @property
    def config_file(self) -> Path:
        return self.config_dir / CONFIG_FILE_NAME

    @property
    def log_file(self) -> Path:
        return self.config_dir / LOG_FILE_NAME

    @property
    def version_file(self) -> Path:
        return self.config_dir / VERSION_FILE_NAME

    def guide(self, name) -> Path:
        return self.config_dir / name

    def wallpaper(self, name) -> Path:
        return self.wallpaper_dir / name


def load_config(paths: Paths) -> dict:
    """Read the Bureau config file, or an empty dict if it is missing or broken."""
    path = paths.config_file
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config %s: %s", path, e)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(paths: Paths, data: dict) -> None:
    """Persist the config file. It may hold a secret, so it is private to the user."""
    path = paths.config_file
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    path.chmod(0o600)


def read_version(paths: Paths) -> str:
    try:
        return paths.version_file.read_text(encoding="utf-8").strip() or BUREAU_VERSION
    except OSError:
        return BUREAU_VERSION
