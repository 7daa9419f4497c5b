import enum
import logging

from .config import WALLPAPER_DARK, WALLPAPER_LIGHT
from .gnome import BACKGROUND, INTERFACE, file_uri

logger = logging.getLogger(__name__)


class ThemeMode(enum.Enum):
    DARK = "dark"
    LIGHT = "light"

    @classmethod
    def parse(cls, value):
        """Return the mode named by value, or None for anything else."""
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return None


# ==============================================================================
# PRESETS
# ==============================================================================

PRESETS = {
    ThemeMode.DARK: {
        "settings": [
            (INTERFACE, "color-scheme", "prefer-dark"),
            (INTERFACE, "gtk-theme", "Adwaita-dark"),
        ],
        "wallpaper": WALLPAPER_DARK,
    },
    ThemeMode.LIGHT: {
        "settings": [
            (INTERFACE, "color-scheme", "prefer-light"),
            (INTERFACE, "gtk-theme", "Adwaita"),
        ],
        "wallpaper": WALLPAPER_LIGHT,
    },
}


def apply_theme(mode, settings, paths) -> bool:
    """Switch the desktop to mode.

    Writes the preset's interface keys, then points both background keys at
    the mode's wallpaper if it has been generated. Returns whether the
    wallpaper was applied; a missing wallpaper leaves the background alone.
    """
    preset = PRESETS[mode]
    for schema, key, value in preset["settings"]:
        settings.set(schema, key, value)

    wallpaper = paths.wallpaper(preset["wallpaper"])
    if not wallpaper.is_file():
        logger.info("No %s wallpaper at %s, background unchanged", mode.value, wallpaper)
        return False

    uri = file_uri(wallpaper)
    settings.set(BACKGROUND, "picture-uri", uri)
    settings.set(BACKGROUND, "picture-uri-dark", uri)
    return True
