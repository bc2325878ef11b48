"""Tag extraction, reconciliation and tree walking."""

from .context import CompareContext
from .extractor import matches_doc_type, parse_line, read_tags
from .paths import PathKind, ensure_path
from .reconciler import Reconciliation, find_missing, reconcile
from .updater import OUTDATED_MARKER, append_tags, format_entry, is_comment_or_doctype
from .walker import compare, compare_files

__all__ = [
    "CompareContext",
    "parse_line",
    "matches_doc_type",
    "read_tags",
    "PathKind",
    "ensure_path",
    "Reconciliation",
    "find_missing",
    "reconcile",
    "OUTDATED_MARKER",
    "append_tags",
    "format_entry",
    "is_comment_or_doctype",
    "compare",
    "compare_files",
]
