import logging

from .assets import DAVINCI_GUIDE
from .config import DAVINCI_GUIDE as DAVINCI_GUIDE_FILE
from .runner import dnf_install, flatpak_install

logger = logging.getLogger(__name__)

RPMFUSION = "https://mirrors.rpmfusion.org/{kind}/fedora/rpmfusion-{kind}-release-{release}.noarch.rpm"
FLATHUB = "https://dl.flathub.org/repo/flathub.flatpakrepo"
CHROME_REPO_FILE = "/etc/yum.repos.d/google-chrome.repo"
CHROME_REPO = """[google-chrome]
name=google-chrome
baseurl=https://dl.google.com/linux/chrome/rpm/stable/x86_64
enabled=1
gpgcheck=1
gpgkey=https://dl.google.com/linux/linux_signing_key.pub
"""

CORE_PACKAGES = [
    # Build essentials
    "gcc", "gcc-c++", "make", "cmake", "git", "curl", "wget", "unzip",
    # System utilities
    "htop", "btop", "fastfetch", "neofetch",
    # File management
    "nautilus", "file-roller", "p7zip", "p7zip-plugins",
    # Networking
    "NetworkManager-wifi",
    # Multimedia codecs
    "gstreamer1-plugins-base", "gstreamer1-plugins-good",
    "gstreamer1-plugins-bad-free", "gstreamer1-plugins-ugly",
    "gstreamer1-libav",
    # Font rendering
    "freetype", "fontconfig",
    # Clipboard
    "wl-clipboard", "xclip",
    "gnome-screenshot",
    # Colour management
    "colord", "gnome-color-manager",
    "gnome-disk-utility",
    "unrar",
    # Thumbnails
    "gnome-epub-thumbnailer", "ffmpegthumbnailer",
]

# (label, packages)
CREATIVE_SUITE = [
    ("GIMP (photo editing)", ["gimp", "gimp-data-extras"]),
    ("Inkscape (vector graphics)", ["inkscape"]),
    ("Krita (digital painting)", ["krita"]),
    ("Blender (3D modelling & animation)", ["blender"]),
    ("Darktable (RAW photo processing)", ["darktable"]),
    ("Scribus (desktop publishing)", ["scribus"]),
    ("Shotwell (photo management)", ["shotwell"]),
    ("Kdenlive (video editing)", ["kdenlive"]),
    ("OBS Studio (screen recording & streaming)", ["obs-studio"]),
]

# Resolve itself needs a registered download from Blackmagic
DAVINCI_DEPENDENCIES = [
    "libxcrypt-compat", "mesa-libGLU", "alsa-lib", "apr", "apr-util",
    "libxkbcommon-x11", "mesa-libOpenCL", "ocl-icd",
    "opencl-headers", "libXtst", "libXfixes",
]

DNF_APPS = [
    ("Google Chrome", "google-chrome-stable"),
    ("LibreOffice", "libreoffice"),
    ("GNOME Terminal", "gnome-terminal"),
]

FLATPAK_APPS = [
    ("Spotify", "com.spotify.Client"),
    ("Discord", "com.discordapp.Discord"),
    ("Obsidian (notes & knowledge base)", "md.obsidian.Obsidian"),
    ("Telegram", "org.telegram.desktop"),
    ("Bottles (Windows app compatibility)", "com.usebottles.bottles"),
    ("LocalSend (AirDrop alternative)", "org.localsend.localsend_app"),
]

FONT_PACKAGES = [
    # Google
    "google-noto-sans-fonts", "google-noto-serif-fonts", "google-noto-sans-mono-fonts",
    "google-noto-emoji-fonts", "google-noto-color-emoji-fonts",
    # Adobe
    "adobe-source-code-pro-fonts", "adobe-source-sans-pro-fonts", "adobe-source-serif-pro-fonts",
    # Mozilla
    "mozilla-fira-sans-fonts", "mozilla-fira-mono-fonts",
    # IBM
    "ibm-plex-sans-fonts", "ibm-plex-mono-fonts", "ibm-plex-serif-fonts",
    "jetbrains-mono-fonts-all",
    "rsms-inter-fonts",
    # Liberation (metric-compatible with Arial, Times, Courier)
    "liberation-sans-fonts", "liberation-serif-fonts", "liberation-mono-fonts",
    "dejavu-sans-fonts", "dejavu-serif-fonts", "dejavu-sans-mono-fonts",
    "cascadia-code-fonts",
]

# Design fonts not packaged for Fedora: (directory name, Google Fonts family)
DOWNLOADED_FONTS = [
    ("dm-sans", "DM+Sans"),
    ("space-grotesk", "Space+Grotesk"),
    ("syne", "Syne"),
    ("work-sans", "Work+Sans"),
]
FONT_URL = "https://fonts.google.com/download?family={family}"

TABLET_PACKAGES = ["xorg-x11-drv-wacom", "libwacom", "gnome-control-center"]
COLOUR_PACKAGES = ["colord", "gnome-color-manager", "argyllcms"]


def font_archive(name) -> str:
    return f"/tmp/{name}.zip"


def update_system(ctx):
    ctx.runner(["dnf", "upgrade", "-y", "--refresh"], sudo=True)
    ctx.ui.success("System updated")


def setup_repos(ctx):
    # 1. RPM Fusion (many multimedia packages live there)
    ctx.ui.substep("Adding RPM Fusion (free + nonfree)")
    release = ctx.runner(["rpm", "-E", "%fedora"], capture=True, check=False).stdout.strip()
    if release.isdigit():
        urls = [RPMFUSION.format(kind=kind, release=release) for kind in ("free", "nonfree")]
        dnf_install(ctx.runner, urls, check=False)
        ctx.ui.success("RPM Fusion enabled")
    else:
        ctx.ui.warn("Could not determine the Fedora release, skipping RPM Fusion")

    # 2. Flathub
    ctx.ui.substep("Adding Flathub repository")
    ctx.runner(["flatpak", "remote-add", "--if-not-exists", "flathub", FLATHUB])
    ctx.ui.success("Flathub enabled")

    # 3. Google Chrome repo file (root-owned, so it goes through sudo tee)
    ctx.ui.substep("Adding Google Chrome repository")
    ctx.runner(["tee", CHROME_REPO_FILE], sudo=True, input=CHROME_REPO, capture=True)
    ctx.ui.success("Google Chrome repo added")


def install_core(ctx):
    dnf_install(ctx.runner, CORE_PACKAGES)
    ctx.ui.success("Core packages installed")


def install_creative_suite(ctx):
    for label, packages in CREATIVE_SUITE:
        name = label.split(" (")[0]
        ctx.ui.substep(f"Installing {label}")
        dnf_install(ctx.runner, packages)
        ctx.ui.success(f"{name} installed")

    ctx.ui.substep("Preparing DaVinci Resolve")
    dnf_install(ctx.runner, DAVINCI_DEPENDENCIES, check=False)
    ctx.write(ctx.paths.guide(DAVINCI_GUIDE_FILE), DAVINCI_GUIDE)
    ctx.ui.success("DaVinci Resolve dependencies installed (run 'bureau davinci' for setup guide)")

    ctx.ui.substep("Installing ImageMagick (command-line image processing)")
    dnf_install(ctx.runner, ["ImageMagick"])
    ctx.ui.success("ImageMagick installed")

    # Figma and friends become Chrome web apps in the AI stage
    ctx.ui.success("Creative suite installed")


def install_apps(ctx):
    for name, package in DNF_APPS:
        ctx.ui.substep(f"Installing {name}")
        dnf_install(ctx.runner, [package])
        ctx.ui.success(f"{name} installed")

    for label, app_id in FLATPAK_APPS:
        name = label.split(" (")[0]
        ctx.ui.substep(f"Installing {label}")
        flatpak_install(ctx.runner, app_id)
        ctx.ui.success(f"{name} installed")


def install_fonts(ctx):
    font_dir = ctx.paths.font_dir
    if not ctx.dry_run:
        font_dir.mkdir(parents=True, exist_ok=True)

    dnf_install(ctx.runner, FONT_PACKAGES, check=False)

    ctx.ui.substep("Downloading additional designer fonts")
    for name, family in DOWNLOADED_FONTS:
        archive = font_archive(name)
        fetched = ctx.runner(["curl", "-fsSL", "-o", archive, FONT_URL.format(family=family)], check=False)
        if not fetched.ok:
            ctx.ui.warn(f"Could not download {family.replace('+', ' ')}")
            continue
        ctx.runner(["unzip", "-qo", archive, "-d", str(font_dir / name)], check=False)

    ctx.runner(["fc-cache", "-f"])
    ctx.ui.success("Designer font collection installed (30+ families)")


def setup_tablet(ctx):
    dnf_install(ctx.runner, TABLET_PACKAGES, check=False)
    ctx.ui.substep("Note: For non-Wacom tablets (XP-Pen, Huion), install OpenTabletDriver:")
    ctx.ui.substep("  https://opentabletdriver.net")
    ctx.ui.success("Wacom tablet support configured (Settings > Wacom Tablet)")


def setup_colour(ctx):
    dnf_install(ctx.runner, COLOUR_PACKAGES, check=False)
    ctx.ui.substep("Colour management ready - calibrate via Settings > Colour")
    ctx.ui.substep("Note: For accurate print work, calibrate with a hardware colorimeter")
    ctx.ui.success("Colour management configured")


def cleanup(ctx):
    ctx.runner(["dnf", "clean", "all"], sudo=True, check=False)
    for name, _ in DOWNLOADED_FONTS:
        ctx.runner(["rm", "-f", font_archive(name)], check=False)
    ctx.ui.success("Cleanup complete")
