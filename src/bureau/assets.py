"""Static documents Bureau writes into the user's config and data dirs."""

DAVINCI_GUIDE = """# Installing DaVinci Resolve on Bureau

DaVinci Resolve is free professional video editing & colour grading software.
It requires a manual download because Blackmagic requires registration.

## Steps

1. Go to https://www.blackmagicdesign.com/products/davinciresolve
2. Click "Free Download" → choose "DaVinci Resolve for Linux"
3. Register (or log in) and download the .zip file
4. Extract the zip:
   ```
   unzip DaVinci_Resolve_*_Linux.zip
   ```
5. Run the installer:
   ```
   sudo ./DaVinci_Resolve_*_Linux.run
   ```
6. Follow the installer prompts
7. DaVinci Resolve will appear in your app drawer

## Notes

- Bureau has pre-installed all required dependencies
- Free version includes editing, colour, Fairlight audio, and Fusion VFX
- Studio version ($295 one-time) adds GPU acceleration, HDR, and more
- For NVIDIA GPUs: install proprietary drivers for best performance
- For AMD GPUs: the open-source drivers included in Fedora work well
"""

AFFINITY_GUIDE = """# Running Affinity Apps on Bureau Linux via Bottles

Affinity Designer, Photo, and Publisher can run on Linux through Bottles.
This is a best-effort setup: compatibility varies by version.

## Prerequisites

- Bottles is pre-installed (check your app drawer)

## Setup Steps

### 1. Open Bottles
- Launch Bottles from your app drawer
- Create a new bottle called "Affinity"
- Environment: **Application**
- Runner: **Soda** or **Caffe** (latest version)

### 2. Configure the Bottle
In the bottle settings, enable:
- DXVK (for GPU acceleration)
- VKD3D (for DirectX 12 support)
- Windows version: **Windows 10**

### 3. Install Dependencies
In the bottle, go to Dependencies and install:
- dotnet48
- vcredist2019
- corefonts

### 4. Install Affinity
- Download Affinity v2 installers from affinity.serif.com (you need a licence)
- In Bottles, click "Run Executable" and select the Affinity installer
- Follow the Windows installer as normal

### 5. Known Issues
- **GPU rendering**: Some effects may not render correctly. Try disabling hardware acceleration in Affinity preferences.
- **Tablet pressure**: Wacom tablet pressure sensitivity may not work. Check Bottles' input settings.
- **Colour management**: ICC profiles may not load correctly. Export work in sRGB for safety.
- **Affinity v2.6+**: Some newer versions have improved Wine compatibility.

### 6. Alternative: Run in a VM
If Bottles doesn't work well enough, consider:
- GNOME Boxes (pre-installed on Fedora) with a Windows VM
- Assign GPU passthrough for better performance

## Stay Updated

Check these resources for compatibility updates:
- https://forum.affinity.serif.com (search "Linux" or "Wine")
- https://www.codeweavers.com/compatibility/crossover/affinity-designer-2
- https://appdb.winehq.org
"""

RECOMMENDED_EXTENSIONS = """# Bureau - Recommended GNOME Extensions
# Install these via Extension Manager (pre-installed) or extensions.gnome.org
#
# Essential:
# - Blur my Shell - Beautiful blurred overview and panel
# - Dash to Dock - macOS-style dock (customise position/size)
# - AppIndicator - System tray icons (needed for Discord, Spotify etc.)
# - Clipboard Indicator - Clipboard history (essential for design work)
# - Color Picker - Pick colours from anywhere on screen (Super+Shift+C)
#
# Productivity:
# - Space Bar - Workspace indicator in top bar
# - Vitals - System monitor in top bar
# - Quick Settings Tweaker - Better quick settings panel
#
# Aesthetics:
# - User Themes - Custom shell themes
# - Rounded Window Corners - Softer window appearance
# - Compiz alike magic lamp effect - Satisfying minimise animation
"""

# (file id, name, comment, url, wm class, categories, keywords)
WEB_APPS = [
    ("bureau-claude", "Claude", "Claude AI Assistant by Anthropic",
     "https://claude.ai", "claude-ai", "Utility;AI;", "ai;assistant;claude;anthropic;"),
    ("bureau-figma", "Figma", "Collaborative UI/UX Design Tool",
     "https://www.figma.com", "figma", "Graphics;Design;", "design;ui;ux;figma;prototype;"),
    ("bureau-miro", "Miro", "Online Collaborative Whiteboard",
     "https://miro.com", "miro", "Graphics;ProjectManagement;", "whiteboard;miro;collaborate;brainstorm;"),
    ("bureau-notion", "Notion", "All-in-one Workspace",
     "https://www.notion.so", "notion", "Office;ProjectManagement;", "notion;notes;wiki;project;docs;"),
]

DESKTOP_ENTRY = """[Desktop Entry]
Version=1.0
Name={name}
Comment={comment}
Exec=google-chrome-stable --app={url} --class={wm_class}
Icon={icon}
Terminal=false
Type=Application
Categories={categories}
StartupWMClass={wm_class}
Keywords={keywords}
"""


def desktop_entry(name, comment, url, wm_class, categories, keywords) -> str:
    return DESKTOP_ENTRY.format(
        name=name,
        comment=comment,
        url=url,
        wm_class=wm_class,
        icon=wm_class,
        categories=categories,
        keywords=keywords,
    )


ALIASES = """# ============================================================
# Bureau Aliases
# Creative Workflow Shortcuts
# ============================================================

# Quick open apps
alias design='inkscape'
alias paint='krita'
alias photo='gimp'
alias raw='darktable'
alias render='blender'
alias publish='scribus'
alias edit='kdenlive'

# Image operations (via ImageMagick)
alias img-resize='convert -resize'
alias img-info='identify -verbose'
alias img-to-png='mogrify -format png'
alias img-to-jpg='mogrify -format jpg -quality 90'
alias img-to-webp='mogrify -format webp -quality 85'

# Batch operations
alias batch-resize-1200='mogrify -resize 1200x *.png *.jpg 2>/dev/null'
alias batch-resize-2400='mogrify -resize 2400x *.png *.jpg 2>/dev/null'
alias batch-to-webp='mogrify -format webp -quality 85 *.png *.jpg 2>/dev/null'

# File listing (using eza if available)
if command -v eza &>/dev/null; then
    alias ls='eza --icons'
    alias ll='eza -la --icons --git'
    alias lt='eza --tree --level=2 --icons'
fi

# Quick system info
alias sysinfo='fastfetch'

# Bureau
alias bureau-update='bureau-install'
alias ask='bureau-ask'
# End Bureau
"""

STARSHIP_INIT = 'eval "$(starship init bash)"'
LOCAL_BIN_PATH = 'export PATH="$HOME/.local/bin:$PATH"'
