import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .config import load_config, save_config
from .files import append_line_once

logger = logging.getLogger(__name__)

ENV_VAR = "ANTHROPIC_API_KEY"
CONFIG_KEY = "anthropic_api_key"
KEYS_URL = "https://console.anthropic.com/settings/keys"


@dataclass(frozen=True)
class Credential:
    value: str
    source: str  # "flag", "environment" or "config"


@dataclass(frozen=True)
class PersistResult:
    target: Path
    ok: bool
    error: str = ""


def resolve_credential(paths, explicit=None, env=None) -> Optional[Credential]:
    """Find the API key: explicit flag, then environment, then the config file."""
    env = os.environ if env is None else env
    if explicit:
        return Credential(explicit, "flag")
    if env.get(ENV_VAR):
        return Credential(env[ENV_VAR], "environment")
    stored = load_config(paths).get(CONFIG_KEY)
    if isinstance(stored, str) and stored:
        return Credential(stored, "config")
    return None


def export_line(value) -> str:
    quoted = "'" + value.replace("'", "'\"'\"'") + "'"
    return f"export {ENV_VAR}={quoted}"


def persist_credential(paths, value, env=None) -> list:
    """Save a freshly entered key and export it into this process.

    The key goes to the Bureau config file and, as an export line, to every
    shell startup file that already exists. Each target gets its own result.
    """
    results = []

    try:
        data = load_config(paths)
        data[CONFIG_KEY] = value
        save_config(paths, data)
        results.append(PersistResult(paths.config_file, True))
    except OSError as e:
        logger.error("Could not write %s: %s", paths.config_file, e)
        results.append(PersistResult(paths.config_file, False, str(e)))

    for rc in (paths.bashrc, paths.zshrc):
        if not rc.exists():
            continue
        try:
            append_line_once(rc, export_line(value))
            results.append(PersistResult(rc, True))
        except OSError as e:
            logger.error("Could not append to %s: %s", rc, e)
            results.append(PersistResult(rc, False, str(e)))

    (os.environ if env is None else env)[ENV_VAR] = value
    return results
