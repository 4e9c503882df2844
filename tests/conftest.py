import os
import sys
from pathlib import Path
from typing import Dict, Sequence

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"
FIXTURES_ROOT = TESTS_ROOT / "fixtures"

# Make src/ importable as 'glsl_include'
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from glsl_include.core.logging import reset_logging_for_tests  # noqa: E402
from glsl_include.core.utils.io import read_text  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch, tmp_path):
    """Keep user config and GLSL_INCLUDE_* variables out of every test."""
    for key in list(os.environ):
        if key.startswith("GLSL_INCLUDE_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    reset_logging_for_tests()


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_ROOT


@pytest.fixture
def read_case():
    """Return a loader for ``tests/fixtures/<case>/<file>`` contents."""

    def _read(case: str, filename: str) -> str:
        return read_text(FIXTURES_ROOT / case / filename)

    return _read


@pytest.fixture
def case_sources(read_case):
    """Return a loader building a name -> content mapping for a fixture case."""

    def _load(case: str, names: Sequence[str]) -> Dict[str, str]:
        return {name: read_case(case, name) for name in names}

    return _load
