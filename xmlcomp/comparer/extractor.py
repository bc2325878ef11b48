"""Tag extraction.

A tagged line looks like ``<identifier attrs>value</identifier>``. Only the
first ``<``..``>`` pair on a line is taken as the opening tag, the key is
that tag cut at the first space, and the value runs up to the last ``<``.
"""

import os
from pathlib import Path
from typing import Dict, Optional, Tuple

import structlog

from xmlcomp.errors import FileAccessError, InvalidArgumentError

from .context import CompareContext

logger = structlog.get_logger()

TagMap = Dict[str, str]


def parse_line(line: str) -> Optional[Tuple[str, str]]:
    """Extract ``(key, value)`` from one line, or ``None`` if it holds no tag."""
    if not line:
        return None

    start = line.find("<")
    end = line.find(">")
    if start < 0 or end < start:
        return None

    tag = line[start:end + 1]
    if tag[0] == os.sep:
        return None
    key = tag.split(" ")[0]

    value_end = line.rfind("<")
    if value_end < end:
        return None

    return key, line[end + 1:value_end]


def matches_doc_type(path: Path, doc_type: str) -> bool:
    """Check the last dot-separated part of the file name."""
    return Path(path).name.split(".")[-1] == doc_type


def read_tags(path: Path, context: CompareContext) -> TagMap:
    """Read the tag mapping of one file.

    Files of another document type give an empty mapping and are not read.

    Raises:
        InvalidArgumentError: ``path`` has no file name
        FileAccessError: the file cannot be opened or read
    """
    path = Path(path)
    if not str(path) or not path.name:
        raise InvalidArgumentError("Empty file or path name", field="path", value=path)

    if not matches_doc_type(path, context.doc_type):
        logger.debug("Skipping file of other type", file=str(path), doc_type=context.doc_type)
        return {}

    tags: TagMap = {}
    try:
        with open(path, "r", encoding="utf-8", errors="surrogateescape") as f:
            for raw in f:
                context.lines += 1
                parsed = parse_line(raw.rstrip("\r\n"))
                if parsed is None:
                    continue
                key, value = parsed
                tags[key] = value
    except OSError as e:
        raise FileAccessError(
            f"Cannot read {path}: {e}",
            path=path,
            operation="read",
            previous_error=e,
        ) from e

    return tags
