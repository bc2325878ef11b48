"""Settings for a comparison run.

Values come from, in increasing priority: a YAML config file, environment
variables prefixed with ``XMLCOMP_``, and explicit keyword arguments.
"""

from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Comparison settings."""

    model_config = SettingsConfigDict(env_prefix="XMLCOMP_", extra="ignore")

    # File extension (without dot) of the documents to reconcile
    doc_type: str = "xml"

    original_dir: Optional[Path] = None
    translation_dir: Optional[Path] = None

    debug: bool = False

    @field_validator("doc_type")
    @classmethod
    def validate_doc_type(cls, v: str) -> str:
        """Strip a leading dot and reject empty document types."""
        v = v.strip().lstrip(".")
        if not v:
            raise ValueError("doc_type must not be empty")
        return v

    @property
    def has_paths(self) -> bool:
        """Both trees are configured with non-empty paths."""
        return bool(self.original_dir and str(self.original_dir)) and bool(
            self.translation_dir and str(self.translation_dir)
        )
