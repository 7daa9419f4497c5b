import logging
import os
import platform
import shutil
import socket

from .errors import PreflightError

logger = logging.getLogger(__name__)

MIN_FREE_GB = 15
CONNECTIVITY_HOST = ("fedoraproject.org", 443)


def read_os_release() -> dict:
    try:
        return platform.freedesktop_os_release()
    except OSError:
        return {}


def is_fedora(os_release) -> bool:
    return "fedora" in os_release.get("NAME", "").lower() or os_release.get("ID") == "fedora"


def is_gnome(env) -> bool:
    desktops = [d.strip().lower() for d in env.get("XDG_CURRENT_DESKTOP", "").split(":")]
    return "gnome" in desktops or env.get("DESKTOP_SESSION", "").lower() == "gnome"


def has_network(address=CONNECTIVITY_HOST, timeout=5.0) -> bool:
    try:
        with socket.create_connection(address, timeout=timeout):
            return True
    except OSError:
        return False


def free_gb(path) -> int:
    return shutil.disk_usage(path).free // (1024 ** 3)


def run_preflight(ctx, env=None, os_release=None, network=None, free_space=None):
    """Check the machine before anything is installed.

    Soft checks (platform, desktop, disk) let the operator continue anyway;
    declining raises PreflightError. Missing network always raises.
    """
    ui = ctx.ui
    env = os.environ if env is None else env
    os_release = read_os_release() if os_release is None else os_release

    if is_fedora(os_release):
        ui.success("Fedora detected")
    else:
        detected = os_release.get("PRETTY_NAME", "unknown")
        ui.warn(f"Bureau is designed for Fedora. Detected: {detected}")
        if not ui.confirm("Continue anyway?"):
            raise PreflightError(f"Not a Fedora system ({detected})")

    if is_gnome(env):
        ui.success("GNOME desktop detected")
    else:
        ui.warn("GNOME not detected. Bureau is built for GNOME.")
        if not ui.confirm("Continue anyway?"):
            raise PreflightError("Not running a GNOME session")

    if network is None:
        network = has_network()
    if network:
        ui.success("Internet connection OK")
    else:
        ui.warn("No internet connection detected. Bureau needs internet to install.")
        raise PreflightError("No internet connection")

    if free_space is None:
        free_space = free_gb(ctx.paths.home)
    if free_space < MIN_FREE_GB:
        ui.warn(f"Less than {MIN_FREE_GB}GB free. Bureau needs ~{MIN_FREE_GB}GB for all creative apps.")
        if not ui.confirm("Continue anyway?"):
            raise PreflightError(f"Only {free_space}GB free")
    else:
        ui.success(f"Disk space OK ({free_space}GB free)")

    logger.info("Pre-flight passed")
