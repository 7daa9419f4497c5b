import logging
import shutil

from . import assets, styles
from .config import AFFINITY_GUIDE, BUREAU_VERSION, WALLPAPER_DARK
from .files import append_line_once, replace_block
from .gnome import set_background
from .runner import dnf_install

logger = logging.getLogger(__name__)

CLAUDE_CODE_PACKAGE = "@anthropic-ai/claude-code"


def imagemagick():
    # ImageMagick 7 ships `magick`; `convert` is the 6.x name
    return "magick" if shutil.which("magick") else "convert"


def install_theme(ctx):
    ctx.write(ctx.paths.gtk4_css, styles.GTK4_CSS)
    ctx.write(ctx.paths.gtk3_css, styles.GTK3_CSS)
    ctx.ui.success("Bureau Bauhaus theme installed")


def generate_wallpapers(ctx):
    wall_dir = ctx.paths.wallpaper_dir
    if not ctx.dry_run:
        wall_dir.mkdir(parents=True, exist_ok=True)

    tool = imagemagick()
    for name, (background, draw) in styles.WALLPAPERS.items():
        cmd = [tool, "-size", styles.WALLPAPER_SIZE, f"xc:{background}", *draw, str(wall_dir / name)]
        result = ctx.runner(cmd, check=False, capture=True)
        if not result.ok:
            logger.warning("Wallpaper %s not generated: %s", name, result.stderr.strip())


def install_branding(ctx):
    ctx.ui.substep("Generating Bauhaus-inspired wallpapers")
    generate_wallpapers(ctx)

    default = ctx.paths.wallpaper(WALLPAPER_DARK)
    if default.is_file():
        set_background(ctx, default)
        ctx.ui.success("Bureau wallpapers installed & set")
    else:
        ctx.ui.warn("ImageMagick not available yet - wallpapers will generate on next run")


def ensure_local_bin_on_path(ctx):
    if ctx.dry_run:
        return
    if append_line_once(ctx.paths.bashrc, assets.LOCAL_BIN_PATH):
        logger.info("Added ~/.local/bin to PATH in %s", ctx.paths.bashrc)


def install_ai(ctx):
    # 1. Web apps
    ctx.ui.substep("Creating Claude.ai web app shortcut")
    for file_id, name, comment, url, wm_class, categories, keywords in assets.WEB_APPS:
        entry = assets.desktop_entry(name, comment, url, wm_class, categories, keywords)
        ctx.write(ctx.paths.applications_dir / f"{file_id}.desktop", entry)
    ctx.ui.success("Claude.ai, Figma, Miro & Notion web apps created")

    # 2. Claude Code needs Node.js
    ctx.ui.substep("Installing Claude Code (terminal AI assistant)")
    if not shutil.which("node"):
        ctx.ui.substep("Installing Node.js (required for Claude Code)")
        dnf_install(ctx.runner, ["nodejs", "npm"])

    result = ctx.runner(["npm", "install", "-g", CLAUDE_CODE_PACKAGE], check=False)
    if result.ok:
        ctx.ui.success("Claude Code installed (run 'claude' in any terminal)")
    else:
        ctx.ui.warn(f"Claude Code install failed - you can install it later with: npm install -g {CLAUDE_CODE_PACKAGE}")

    # 3. bureau-ask ships with this package; make sure its bin dir is reachable
    ctx.ui.substep("Wiring 'bureau-ask' shell helper")
    ensure_local_bin_on_path(ctx)
    ctx.ui.success("bureau-ask ready (run 'bureau-ask \"your question\"')")


def setup_affinity(ctx):
    ctx.ui.substep("Bottles is installed via Flatpak")
    ctx.ui.substep("Creating Affinity setup guide")
    ctx.write(ctx.paths.guide(AFFINITY_GUIDE), assets.AFFINITY_GUIDE)
    ctx.ui.success("Affinity setup guide saved to ~/.config/bureau/affinity-setup.md")


TERMINAL_TOOLS = [
    "zsh", "fish",
    "fzf", "bat", "eza", "fd-find", "ripgrep",
    "git-delta",
    "jq", "yq",
    "tldr",
]
STARSHIP_INSTALL = "curl -fsSL https://starship.rs/install.sh | sh -s -- -y"


def setup_terminal(ctx):
    ctx.ui.substep("Installing modern CLI tools")
    dnf_install(ctx.runner, TERMINAL_TOOLS, check=False)

    ctx.ui.substep("Installing Starship prompt")
    ctx.runner(STARSHIP_INSTALL, shell=True, check=False)
    ctx.write(ctx.paths.starship_config, styles.STARSHIP_TOML)

    if not ctx.dry_run:
        append_line_once(ctx.paths.bashrc, assets.STARSHIP_INIT)
        # Replaced on every run, never appended twice
        replace_block(ctx.paths.bashrc, assets.ALIASES)
    ctx.ui.success("Terminal configured with creative aliases")


def install_menu(ctx):
    ctx.write(ctx.paths.version_file, BUREAU_VERSION + "\n")
    ctx.ui.success("Bureau helper commands installed (run 'bureau help')")
