"""
Pytest configuration and fixtures for XML-Comp tests.
"""

import tempfile
from pathlib import Path
from typing import Generator

import pytest

from xmlcomp.comparer import CompareContext


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def context() -> CompareContext:
    """Fresh comparison context for xml documents."""
    return CompareContext(doc_type="xml")


@pytest.fixture
def create_test_file(temp_dir: Path):
    """Helper to create test files."""
    def _create_file(filename: str, content: str = "") -> Path:
        file_path = temp_dir / filename
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content, encoding="utf-8")
        return file_path
    return _create_file


@pytest.fixture
def trees(temp_dir: Path):
    """Original and translation roots, both existing and empty."""
    original = temp_dir / "English"
    translation = temp_dir / "Translation"
    original.mkdir()
    translation.mkdir()
    return original, translation


@pytest.fixture
def sample_document() -> str:
    """Sample tagged document."""
    return (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        "<LanguageData>\n"
        "  <name>Alice</name>\n"
        "  <age>30</age>\n"
        "</LanguageData>\n"
    )
