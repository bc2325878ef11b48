"""Making sure translation-side paths exist."""

from enum import Enum
from pathlib import Path

import structlog

from xmlcomp.errors import FileAccessError

logger = structlog.get_logger()

DIRECTORY_MODE = 0o700


class PathKind(str, Enum):
    """What a path is expected to be."""
    DIRECTORY = "directory"
    FILE = "file"


def ensure_path(path: Path, kind: PathKind) -> bool:
    """Create ``path`` as ``kind`` if it does not exist.

    Returns ``True`` when the path was created and ``False`` when it was
    already there.

    Raises:
        FileAccessError: the path exists as the other kind, or creation failed
    """
    path = Path(path)

    if path.exists():
        if (kind is PathKind.DIRECTORY) != path.is_dir():
            raise FileAccessError(
                f"{path} exists but is not a {kind.value}",
                path=path,
                operation="ensure",
            )
        return False

    try:
        if kind is PathKind.DIRECTORY:
            path.mkdir(mode=DIRECTORY_MODE)
        else:
            path.touch(exist_ok=False)
    except OSError as e:
        raise FileAccessError(
            f"Cannot create {kind.value} {path}: {e}",
            path=path,
            operation="create",
            previous_error=e,
        ) from e

    logger.debug("Created path", path=str(path), kind=kind.value)
    return True
