"""Key-set reconciliation between two tag mappings."""

from dataclasses import dataclass, field
from typing import Dict, Optional

TagMap = Dict[str, str]


@dataclass
class Reconciliation:
    """Differences of one file pair."""

    # In original, absent from translation
    missing: TagMap = field(default_factory=dict)
    # In translation, absent from original
    outdated: TagMap = field(default_factory=dict)

    @property
    def total(self) -> int:
        return len(self.missing) + len(self.outdated)


def find_missing(source: TagMap, target: TagMap) -> Optional[TagMap]:
    """Entries of ``source`` whose key does not appear in ``target``.

    Values are not compared. Returns ``None`` when both mappings are
    equal, which tells callers there is nothing to write.
    """
    if source == target:
        return None
    return {key: value for key, value in source.items() if key not in target}


def reconcile(original: TagMap, translation: TagMap) -> Optional[Reconciliation]:
    """Compute missing and outdated entries, or ``None`` if nothing differs."""
    missing = find_missing(original, translation)
    if missing is None:
        return None
    outdated = find_missing(translation, original) or {}
    return Reconciliation(missing=missing, outdated=outdated)
