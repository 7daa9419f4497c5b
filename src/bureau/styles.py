# src/bureau/styles.py

from .config import WALLPAPER_DARK, WALLPAPER_GRID, WALLPAPER_LIGHT, WALLPAPER_MINIMAL

# Bauhaus palette
# Red:    #be1e2d
# Blue:   #21409a
# Yellow: #f2c12e
# Ink:    #1a1a1a
# Paper:  #f5f2eb

GTK4_CSS = """/* ============================================================
   Bureau - Bauhaus Dark Theme (GTK 4 overrides)
   Inspired by Kandinsky, Moholy-Nagy, and the Bauhaus school.
   Primary: #be1e2d (red), #21409a (blue), #f2c12e (yellow)
   ============================================================ */

/* Accent colour - Bauhaus Blue */
@define-color accent_bg_color #21409a;
@define-color accent_fg_color #ffffff;
@define-color accent_color #3a5fc1;

/* Background tones - warm dark */
@define-color window_bg_color #1a1a1a;
@define-color window_fg_color #e8e4de;
@define-color view_bg_color #212121;
@define-color view_fg_color #e8e4de;
@define-color headerbar_bg_color #1a1a1a;
@define-color headerbar_fg_color #e8e4de;
@define-color headerbar_border_color #333333;
@define-color card_bg_color #262626;
@define-color card_fg_color #e8e4de;
@define-color popover_bg_color #262626;
@define-color popover_fg_color #e8e4de;
@define-color dialog_bg_color #262626;
@define-color dialog_fg_color #e8e4de;
@define-color sidebar_bg_color #1e1e1e;
@define-color sidebar_fg_color #e8e4de;

/* Destructive - Bauhaus Red */
@define-color destructive_bg_color #be1e2d;
@define-color destructive_fg_color #ffffff;
@define-color destructive_color #be1e2d;

/* Warning - Bauhaus Yellow */
@define-color warning_bg_color #f2c12e;
@define-color warning_fg_color #1a1a1a;
@define-color warning_color #f2c12e;

/* Success */
@define-color success_bg_color #4a9e6d;
@define-color success_fg_color #ffffff;
@define-color success_color #4a9e6d;

/* Borders & separators */
@define-color borders rgba(255,255,255,0.08);

/* Selection */
@define-color selected_bg_color #21409a;
@define-color selected_fg_color #ffffff;

/* Links - Bauhaus Yellow */
@define-color link_color #f2c12e;
@define-color link_visited_color #d4a826;
"""

# Older GTK 3 apps such as GIMP
GTK3_CSS = """/* Bureau Bauhaus Dark - GTK 3 overrides */
@define-color theme_bg_color #1a1a1a;
@define-color theme_fg_color #e8e4de;
@define-color theme_selected_bg_color #21409a;
@define-color theme_selected_fg_color #ffffff;
@define-color insensitive_bg_color #2a2a2a;
@define-color insensitive_fg_color #888888;
@define-color theme_unfocused_bg_color #1a1a1a;
@define-color theme_unfocused_fg_color #e8e4de;
"""

STARSHIP_TOML = '''# Bureau Starship Prompt - Bauhaus minimal

format = """
$directory\\
$git_branch\\
$git_status\\
$nodejs\\
$python\\
$rust\\
$character"""

[character]
success_symbol = "[▸](bold blue)"
error_symbol = "[▸](bold red)"

[directory]
style = "bold yellow"
truncation_length = 3
truncation_symbol = "…/"

[git_branch]
style = "bold red"
symbol = ""
format = "[$symbol$branch]($style) "

[git_status]
style = "bold blue"
format = "[$all_status$ahead_behind]($style) "

[nodejs]
symbol = "⬢ "
style = "bold green"

[python]
symbol = "🐍 "
style = "bold yellow"
'''

# ImageMagick compositions at 3840x2160, keyed by output file name.
# Each entry is (background, [draw arguments...]).
WALLPAPERS = {
    WALLPAPER_DARK: ("#1a1a1a", [
        "-fill", "#be1e2d", "-draw", "circle 960,1080 960,780",
        "-fill", "#21409a", "-draw", "rectangle 2200,400 3200,1400",
        "-fill", "#f2c12e", "-draw", "polygon 1800,1600 2100,2000 1500,2000",
        "-fill", "rgba(255,255,255,0.03)", "-draw", "line 0,720 3840,720",
        "-fill", "rgba(255,255,255,0.03)", "-draw", "line 0,1440 3840,1440",
        "-fill", "rgba(255,255,255,0.03)", "-draw", "line 1280,0 1280,2160",
        "-fill", "rgba(255,255,255,0.03)", "-draw", "line 2560,0 2560,2160",
    ]),
    WALLPAPER_LIGHT: ("#f5f2eb", [
        "-fill", "#be1e2d", "-draw", "rectangle 200,200 600,600",
        "-fill", "#21409a", "-draw", "circle 3000,500 3000,300",
        "-fill", "#f2c12e", "-draw", "polygon 1920,1800 2120,2100 1720,2100",
        "-fill", "rgba(0,0,0,0.04)", "-draw", "line 0,1080 3840,1080",
        "-fill", "rgba(0,0,0,0.04)", "-draw", "line 1920,0 1920,2160",
    ]),
    WALLPAPER_MINIMAL: ("#1a1a1a", [
        "-fill", "#21409a", "-draw", "rectangle 0,2100 3840,2160",
        "-fill", "#be1e2d", "-draw", "rectangle 0,2060 3840,2100",
        "-fill", "#f2c12e", "-draw", "rectangle 0,2040 3840,2060",
    ]),
    # Bauhaus teaching grid
    WALLPAPER_GRID: ("#1a1a1a", [
        "-stroke", "rgba(255,255,255,0.04)", "-strokewidth", "1",
        "-draw", "line 0,540 3840,540",
        "-draw", "line 0,1080 3840,1080",
        "-draw", "line 0,1620 3840,1620",
        "-draw", "line 960,0 960,2160",
        "-draw", "line 1920,0 1920,2160",
        "-draw", "line 2880,0 2880,2160",
        "-fill", "#be1e2d", "-draw", "circle 1920,1080 1920,1060",
    ]),
}

WALLPAPER_SIZE = "3840x2160"
