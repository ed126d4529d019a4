from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from performscan.analysis.section_scanner import scan


def _normalize_code(code: str) -> str:
    # Allow indented triple-quoted snippets in tests.
    return textwrap.dedent(code).lstrip("\n")


@pytest.fixture
def cobol():
    """Dedents a COBOL snippet and scans it."""

    def _scan(code: str):
        return scan(_normalize_code(code))

    return _scan


@pytest.fixture
def cobol_file(tmp_path: Path):
    """Writes a COBOL snippet to a temporary .cbl file and returns its path."""

    def _write(code: str, name: str = "PROG.cbl") -> Path:
        path = tmp_path / name
        path.write_text(_normalize_code(code), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def perform_chain():
    """Source for a straight chain 100-P0 -> 100-P1 -> ... of `length` paragraphs."""

    def _chain(length: int, sql_at_end: bool = False) -> str:
        lines = []
        for i in range(length):
            lines.append(f"100-P{i}.")
            if i + 1 < length:
                lines.append(f"    PERFORM 100-P{i + 1}")
        if sql_at_end:
            lines.append("    EXEC SQL COMMIT END-EXEC")
        return "\n".join(lines) + "\n"

    return _chain
