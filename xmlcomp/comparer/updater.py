"""Appending reconciliation results to translation files.

Translation files are never rewritten. Each result is appended on its own
line in one of three shapes::

    <!-- comment or <?doctype line, verbatim
    [OUTDATED]<key>
    <key>value</key>
"""

import os
from pathlib import Path
from typing import Dict, Optional

import structlog

from xmlcomp.errors import FileAccessError

from .context import CompareContext

logger = structlog.get_logger()

OUTDATED_MARKER = "[OUTDATED]"

COMMENT_PREFIXES = ("<!-", "<--")


def is_comment_or_doctype(key: str, doc_type: str) -> bool:
    """Comment openers and ``<?doctype`` declarations are passed through verbatim."""
    return key.startswith(COMMENT_PREFIXES + ("<?" + doc_type,))


def format_entry(key: str, value: str, doc_type: str, outdated: bool = False) -> Optional[str]:
    """Build the line appended for ``key``, or ``None`` if the key is skipped."""
    if len(key) < 2 or key[1] == os.sep:
        return None
    if outdated:
        return f"\n{OUTDATED_MARKER}{key}"
    if is_comment_or_doctype(key, doc_type):
        return f"\n{key}"
    return f"\n{key}{value}</{key[1:]}"


def append_tags(
    path: Path,
    tags: Dict[str, str],
    context: CompareContext,
    outdated: bool = False,
) -> int:
    """Append ``tags`` to ``path`` and return how many lines were written.

    Raises:
        FileAccessError: the file cannot be opened or written
    """
    written = 0
    try:
        # The file must already exist
        with open(path, "r+", encoding="utf-8", errors="surrogateescape") as f:
            f.seek(0, os.SEEK_END)
            for key, value in tags.items():
                entry = format_entry(key, value, context.doc_type, outdated=outdated)
                if entry is None:
                    logger.debug("Skipping invalid key", file=str(path), key=key)
                    continue
                f.write(entry)
                context.in_need += 1
                written += 1
    except OSError as e:
        raise FileAccessError(
            f"Cannot append to {path}: {e}",
            path=path,
            operation="append",
            previous_error=e,
        ) from e

    if written:
        logger.debug(
            "Appended entries",
            file=str(path),
            count=written,
            kind="outdated" if outdated else "missing",
        )
    return written
