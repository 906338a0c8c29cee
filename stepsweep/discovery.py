"""Locate and read step and feature files."""

import asyncio
import glob
import logging
import os
import re
from pathlib import Path
from typing import Iterable, Union

logger = logging.getLogger(__name__)

_BRACE_RE = re.compile(r"\{([^{}]*,[^{}]*)\}")


def expand_braces(pattern: str) -> list[str]:
    """Expand ``{a,b}`` alternatives the way shell globs do.

    >>> expand_braces("steps/**/*.{js,ts}")
    ['steps/**/*.js', 'steps/**/*.ts']
    """
    match = _BRACE_RE.search(pattern)
    if match is None:
        return [pattern]
    head, tail = pattern[: match.start()], pattern[match.end():]
    expanded = []
    for option in match.group(1).split(","):
        expanded.extend(expand_braces(head + option + tail))
    return expanded


def discover_files(pattern: str, root: Union[str, Path] = ".") -> list[str]:
    """Return the sorted, de-duplicated files matching ``pattern`` below ``root``.

    Hidden files and directories are not matched. An unusable pattern yields
    no files.
    """
    root = Path(root)
    found = set()
    for expanded in expand_braces(pattern):
        try:
            if os.path.isabs(expanded):
                matches = glob.glob(expanded, recursive=True)
            else:
                matches = [
                    str(root / m) for m in glob.glob(expanded, root_dir=root, recursive=True)
                ]
        except (OSError, ValueError) as e:
            logger.warning("Could not expand glob %s: %s", expanded, e)
            continue
        found.update(m for m in matches if os.path.isfile(m))
    files = sorted(found)
    logger.debug("Glob %s matched %d files", pattern, len(files))
    return files


def read_text(path: str) -> str:
    """Read a file as UTF-8, returning an empty string when it can't be read."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read %s: %s", path, e)
        return ""


async def read_sources_async(paths: Iterable[str]) -> list[tuple[str, str]]:
    """Read all ``paths`` concurrently from inside a running event loop.

    Returns ``(path, text)`` pairs in input order; unreadable files give ``""``.
    """
    paths = list(paths)
    texts = await asyncio.gather(*(asyncio.to_thread(read_text, p) for p in paths))
    return list(zip(paths, texts))


def read_sources(paths: Iterable[str]) -> list[tuple[str, str]]:
    """Read all ``paths`` concurrently and return ``(path, text)`` in input order.

    Starts its own event loop with ``asyncio.run``, so it raises ``RuntimeError``
    when called while a loop is already running; await ``read_sources_async``
    there instead.
    """
    return asyncio.run(read_sources_async(paths))
