import logging

from .assets import RECOMMENDED_EXTENSIONS
from .config import EXTENSIONS_LIST
from .runner import dnf_install, flatpak_install

logger = logging.getLogger(__name__)

# --- SETTINGS STORE ---


def gvariant(value) -> str:
    """Render a Python value the way `gsettings set` parses it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(gvariant(v) for v in value) + "]"
    text = str(value).replace("\\", "\\\\").replace("'", "\\'")
    return f"'{text}'"


class GSettings:
    """The desktop settings store, reached through the `gsettings` tool."""

    def __init__(self, runner):
        self.runner = runner

    def set(self, schema, key, value, check=True):
        return self.runner(["gsettings", "set", schema, key, gvariant(value)], check=check)

    def get(self, schema, key):
        result = self.runner(["gsettings", "get", schema, key], check=False, capture=True)
        return result.stdout.strip() if result.ok else None

    def reset(self, schema, key, check=False):
        return self.runner(["gsettings", "reset", schema, key], check=check)


def file_uri(path) -> str:
    return path.absolute().as_uri()


# --- DESKTOP SETTINGS ---

INTERFACE = "org.gnome.desktop.interface"
WM_PREFS = "org.gnome.desktop.wm.preferences"
BACKGROUND = "org.gnome.desktop.background"

FAVORITE_APPS = [
    "google-chrome.desktop",
    "org.gnome.Nautilus.desktop",
    "org.gnome.Terminal.desktop",
    "bureau-claude.desktop",
    "bureau-figma.desktop",
    "bureau-miro.desktop",
    "bureau-notion.desktop",
    "gimp.desktop",
    "org.inkscape.Inkscape.desktop",
    "org.kde.krita.desktop",
    "org.blender.Blender.desktop",
    "com.spotify.Client.desktop",
    "com.discordapp.Discord.desktop",
    "md.obsidian.Obsidian.desktop",
]

DESKTOP_SETTINGS = [
    # Appearance
    (INTERFACE, "color-scheme", "prefer-dark"),
    (INTERFACE, "gtk-theme", "Adwaita-dark"),
    (INTERFACE, "icon-theme", "Adwaita"),
    (INTERFACE, "cursor-theme", "Adwaita"),
    (INTERFACE, "font-name", "Inter 11"),
    (INTERFACE, "document-font-name", "Inter 11"),
    (INTERFACE, "monospace-font-name", "JetBrains Mono 10"),
    (WM_PREFS, "titlebar-font", "Inter Bold 11"),
    # Font rendering
    (INTERFACE, "font-antialiasing", "rgba"),
    (INTERFACE, "font-hinting", "slight"),
    # Window behaviour
    (WM_PREFS, "button-layout", "appmenu:minimize,maximize,close"),
    ("org.gnome.mutter", "center-new-windows", True),
    # Touchpad (natural scrolling like macOS)
    ("org.gnome.desktop.peripherals.touchpad", "natural-scroll", True),
    ("org.gnome.desktop.peripherals.touchpad", "tap-to-click", True),
    ("org.gnome.desktop.peripherals.mouse", "natural-scroll", False),
    # Night Light
    ("org.gnome.settings-daemon.plugins.color", "night-light-enabled", True),
    ("org.gnome.settings-daemon.plugins.color", "night-light-temperature", 3500),
    # File manager
    ("org.gnome.nautilus.preferences", "default-folder-viewer", "list-view"),
    ("org.gnome.nautilus.list-view", "default-zoom-level", "small"),
    ("org.gnome.nautilus.preferences", "show-hidden-files", False),
    # Power
    ("org.gnome.settings-daemon.plugins.power", "sleep-inactive-ac-timeout", 1800),
    ("org.gnome.desktop.session", "idle-delay", 300),
    # Workspaces (4 fixed, one per project)
    ("org.gnome.mutter", "dynamic-workspaces", False),
    (WM_PREFS, "num-workspaces", 4),
    # Dock / Dash
    ("org.gnome.shell", "favorite-apps", FAVORITE_APPS),
]

# Interface keys put back to their defaults on uninstall
RESET_INTERFACE_KEYS = [
    "color-scheme",
    "gtk-theme",
    "font-name",
    "document-font-name",
    "monospace-font-name",
]


def configure_gnome(ctx):
    ctx.ui.substep("Applying GNOME settings")
    settings = ctx.settings
    for schema, key, value in DESKTOP_SETTINGS:
        # A schema missing on this machine (e.g. Nautilus not installed) is not fatal
        settings.set(schema, key, value, check=False)
    ctx.ui.success("GNOME settings applied")


def set_background(ctx, path):
    uri = file_uri(path)
    settings = ctx.settings
    settings.set(BACKGROUND, "picture-uri", uri)
    settings.set(BACKGROUND, "picture-uri-dark", uri)
    settings.set(BACKGROUND, "picture-options", "zoom")


# --- EXTENSIONS ---

def install_extensions(ctx):
    ctx.ui.substep("Installing Extension Manager")
    flatpak_install(ctx.runner, "com.mattjakeman.ExtensionManager")
    ctx.ui.success("Extension Manager installed")

    # gnome-extensions-cli allows scripted installs later on
    ctx.ui.substep("Installing gnome-extensions-cli")
    dnf_install(ctx.runner, ["pipx"], check=False)
    result = ctx.runner(["pipx", "install", "gnome-extensions-cli"], check=False)
    if not result.ok:
        ctx.runner(["pip", "install", "--user", "gnome-extensions-cli"], check=False)

    ctx.write(ctx.paths.guide(EXTENSIONS_LIST), RECOMMENDED_EXTENSIONS)
    ctx.ui.success("Extension recommendations saved to ~/.config/bureau/")
    ctx.ui.substep("Open Extension Manager after install to enable recommended extensions")
