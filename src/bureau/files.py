"""Small, idempotent edits to generated files and shell startup files."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

BLOCK_START = "# Bureau Aliases"
BLOCK_END = "# End Bureau"


def write_file(path: Path, text: str, mode=None) -> Path:
    """Overwrite path with text, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    if mode is not None:
        path.chmod(mode)
    logger.debug("Wrote %s", path)
    return path


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return ""


def append_line_once(path: Path, line: str) -> bool:
    """Append line unless an identical line is already present. Returns True if written."""
    current = _read(path)
    if line in current.splitlines():
        return False
    if current and not current.endswith("\n"):
        current += "\n"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(current + line + "\n", encoding="utf-8")
    return True


def _is_separator(line: str) -> bool:
    # "# =====...="
    body = line.strip().lstrip("#").strip()
    return bool(body) and set(body) == {"="}


def strip_block(text: str, start=BLOCK_START, end=BLOCK_END) -> str:
    """Remove every start..end block (inclusive) from text.

    The separator comment line directly above the start marker belongs to the
    block too.
    """
    out = []
    inside = False
    for line in text.splitlines(keepends=True):
        stripped = line.strip()
        if not inside and stripped == start:
            inside = True
            if out and _is_separator(out[-1]):
                out.pop()
            continue
        if inside:
            if stripped == end:
                inside = False
            continue
        out.append(line)
    return "".join(out)


def replace_block(path: Path, body: str, start=BLOCK_START, end=BLOCK_END) -> None:
    """Write body as the single start..end block of path, replacing any previous one."""
    current = strip_block(_read(path), start, end).rstrip("\n")
    block = body.rstrip("\n")
    text = f"{current}\n\n{block}\n" if current else f"{block}\n"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def remove_block(path: Path, start=BLOCK_START, end=BLOCK_END) -> bool:
    current = _read(path)
    if not current:
        return False
    stripped = strip_block(current, start, end)
    if stripped == current:
        return False
    path.write_text(stripped, encoding="utf-8")
    return True


def remove_lines_containing(path: Path, needle: str) -> int:
    current = _read(path)
    if not current:
        return 0
    lines = current.splitlines(keepends=True)
    kept = [line for line in lines if needle not in line]
    if len(kept) != len(lines):
        path.write_text("".join(kept), encoding="utf-8")
    return len(lines) - len(kept)
