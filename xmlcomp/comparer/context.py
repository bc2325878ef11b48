"""State of a single comparison run."""

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass
class CompareContext:
    """Document type and running counters for one comparison.

    ``doc_type`` is set once before the walk starts and only read after
    that. The counters are updated in place while files are processed.
    """

    doc_type: str
    docs: int = 0
    lines: int = 0
    in_need: int = 0
    dirs_created: int = 0
    files_created: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)
