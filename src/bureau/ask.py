"""bureau-ask: a quick Claude helper for the terminal.

Usage: bureau-ask "resize all PNGs in this folder to 1200px"
"""

import argparse
import json
import logging
import os
import sys

import httpx

from .config import Paths
from .console import Reporter, setup_logging
from .credentials import KEYS_URL, persist_credential, resolve_credential

logger = logging.getLogger(__name__)

API_URL = "https://api.anthropic.com/v1/messages"
API_VERSION = "2023-06-01"
MODEL = "claude-sonnet-4-20250514"
MAX_TOKENS = 1024
LISTING_LIMIT = 20

FALLBACK = "Error: Could not get response. Check your API key."

# No read timeout: a long answer blocks until it arrives, like the shell helper did
TIMEOUT = httpx.Timeout(None, connect=10.0)

PERSONA = (
    "You are Bureau Ask, a creative assistant built into Bureau Linux. "
    "The user is a designer/creative professional running Fedora Linux with GNOME. "
    "They have GIMP, Inkscape, Krita, Blender, Darktable, ImageMagick, and ffmpeg available. "
    "Give concise, practical answers. If the answer is a command, just give the command. "
    "If it's a multi-step process, number the steps briefly."
)

USAGE = """Bureau Ask - Claude-powered terminal helper

Usage:
  bureau-ask "your question here"

Examples:
  bureau-ask "resize all PNGs in this folder to 1200px wide"
  bureau-ask "convert this SVG to a 300dpi PNG"
  bureau-ask "find all .psd files larger than 100MB"
  bureau-ask "batch rename these files to lowercase with dashes"
"""


def directory_listing(cwd, limit=LISTING_LIMIT):
    try:
        return sorted(os.listdir(cwd))[:limit]
    except OSError:
        return []


def build_system_prompt(cwd) -> str:
    files = "\n".join(directory_listing(cwd))
    return f"{PERSONA} Current directory: {cwd} Files here: {files}"


def build_payload(question, system) -> dict:
    return {
        "model": MODEL,
        "max_tokens": MAX_TOKENS,
        "system": system,
        "messages": [{"role": "user", "content": question}],
    }


def extract_text(body):
    """Return the text of the first text block in a Messages API reply, or None."""
    try:
        data = json.loads(body)
        for block in data.get("content", []):
            if block.get("type") == "text" and isinstance(block.get("text"), str):
                return block["text"]
    except (ValueError, TypeError, AttributeError) as e:
        logger.debug("Unparseable response: %s", e)
    return None


def query(question, api_key, client=None, cwd=None):
    """Send one question and return the reply text, or None on any failure."""
    cwd = cwd or os.getcwd()
    payload = build_payload(question, build_system_prompt(cwd))
    headers = {
        "content-type": "application/json",
        "x-api-key": api_key,
        "anthropic-version": API_VERSION,
    }
    own_client = client is None
    if own_client:
        client = httpx.Client(timeout=TIMEOUT)
    try:
        response = client.post(API_URL, json=payload, headers=headers)
        logger.debug("Inference API answered %s", response.status_code)
        body = response.text
    except (httpx.HTTPError, UnicodeEncodeError) as e:
        # Header values must be ASCII; a mangled paste fails here
        logger.warning("Request to %s failed: %s", API_URL, e)
        body = ""
    finally:
        if own_client:
            client.close()
    return extract_text(body)


def onboard(ui, paths, env=None):
    """Ask for a key once, save it, and return it ("" if nothing was entered)."""
    ui.console.print("Bureau Ask needs your Anthropic API key.", style="bright_black")
    ui.console.print(f"Get one at: {KEYS_URL}", style="bright_black")
    ui.echo()
    value = ui.secret("Paste your API key (it won't be displayed)").strip()
    if not value:
        return ""
    if not value.isascii():
        ui.warn("That key contains non-ASCII characters (a stray quote or ellipsis?) and was not saved.")
        return ""

    for result in persist_credential(paths, value, env=env):
        if result.ok:
            ui.success(f"API key saved to {result.target}")
        else:
            ui.warn(f"Could not save API key to {result.target}: {result.error}")
    ui.echo()
    return value


def run(words, ui, paths, api_key=None, env=None, client=None, cwd=None) -> int:
    question = " ".join(words).strip()
    if not question:
        ui.echo(USAGE)
        return 0

    credential = resolve_credential(paths, explicit=api_key, env=env)
    if credential is not None:
        key = credential.value
        logger.debug("Using API key from %s", credential.source)
    else:
        key = onboard(ui, paths, env=env)
        if not key:
            ui.warn("No usable API key entered, nothing was sent.")
            return 0

    answer = query(question, key, client=client, cwd=cwd)
    ui.echo(answer if answer is not None else FALLBACK)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(
        prog="bureau-ask",
        description="Ask Claude a quick question from the terminal.",
    )
    parser.add_argument("question", nargs="*", help="the question, quoted or not")
    parser.add_argument("--api-key", help="use this key instead of the saved one")
    parser.add_argument("--verbose", action="store_true", help="log to stderr")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    paths = Paths.from_env()
    setup_logging(paths, verbose=args.verbose)
    try:
        return run(args.question, Reporter(), paths, api_key=args.api_key)
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
