"""Tree walk mirroring the original tree onto the translation tree.

The walk is depth-first and synchronous. Translation paths are built by
joining the translation root with each entry's path relative to the
original root. The first error aborts the whole walk.
"""

from pathlib import Path
from typing import Optional, Union

import structlog

from xmlcomp.errors import FileAccessError, InvalidArgumentError, log_errors

from .context import CompareContext
from .extractor import matches_doc_type, read_tags
from .paths import PathKind, ensure_path
from .reconciler import Reconciliation, reconcile
from .updater import append_tags

logger = structlog.get_logger()

PathLike = Union[str, Path]


@log_errors(operation_name="compare")
def compare(
    original: PathLike,
    translation: PathLike,
    doc_type: Optional[str] = None,
    context: Optional[CompareContext] = None,
) -> CompareContext:
    """Reconcile every document under ``original`` into ``translation``.

    Args:
        original: Root of the original tree
        translation: Root of the translation tree, created if absent
        doc_type: Extension of the documents to reconcile
        context: Existing context to accumulate into

    Returns:
        The context holding the final counters
    """
    if not original or not str(original):
        raise InvalidArgumentError("Empty original path", field="original", value=original)
    if not translation or not str(translation):
        raise InvalidArgumentError("Empty translation path", field="translation", value=translation)

    if context is None:
        if not doc_type:
            raise InvalidArgumentError("Document type is not set", field="doc_type", value=doc_type)
        context = CompareContext(doc_type=doc_type)
    elif doc_type and doc_type != context.doc_type:
        raise InvalidArgumentError(
            "Document type differs from the context's",
            field="doc_type",
            value=doc_type,
        )

    original_root = Path(original)
    translation_root = Path(translation)

    logger.info(
        "Starting comparison",
        original=str(original_root),
        translation=str(translation_root),
        doc_type=context.doc_type,
    )

    _walk(original_root, translation_root, context)

    logger.info("Comparison finished", **context.to_dict())
    return context


def _walk(original_dir: Path, translation_dir: Path, context: CompareContext) -> None:
    # The original side is listed before its mirror is created
    try:
        entries = sorted(original_dir.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise FileAccessError(
            f"Cannot list {original_dir}: {e}",
            path=original_dir,
            operation="list",
            previous_error=e,
        ) from e

    if ensure_path(translation_dir, PathKind.DIRECTORY):
        context.dirs_created += 1

    for entry in entries:
        target = translation_dir / entry.name
        # Symlinked directories are not followed
        if entry.is_dir() and not entry.is_symlink():
            _walk(entry, target, context)
        else:
            context.docs += 2
            compare_files(entry, target, context)


def compare_files(
    original_file: Path,
    translation_file: Path,
    context: CompareContext,
) -> Optional[Reconciliation]:
    """Reconcile one file pair, appending differences to ``translation_file``.

    Files of another document type are skipped and nothing is created for
    them. A missing translation file is created empty and treated as having
    no tags. Returns ``None`` when the pair has no differences.
    """
    original_file = Path(original_file)
    translation_file = Path(translation_file)
    if not original_file.name or not translation_file.name:
        raise InvalidArgumentError(
            "Empty file or path name",
            field="file",
            value=original_file if not original_file.name else translation_file,
        )

    if not matches_doc_type(original_file, context.doc_type):
        logger.debug("Skipping file of other type", file=str(original_file), doc_type=context.doc_type)
        return None

    logger.debug("Comparing files", original=str(original_file), translation=str(translation_file))

    original_tags = read_tags(original_file, context)
    if ensure_path(translation_file, PathKind.FILE):
        context.files_created += 1
        translation_tags = {}
    else:
        translation_tags = read_tags(translation_file, context)

    result = reconcile(original_tags, translation_tags)
    if result is None:
        return None

    append_tags(translation_file, result.outdated, context, outdated=True)
    append_tags(translation_file, result.missing, context)
    return result
