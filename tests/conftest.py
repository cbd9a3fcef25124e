"""Shared fixtures: a directory of standard property files."""

from pathlib import Path
from typing import Callable, Dict, Optional

import pytest

from vidar.kind import Kind

COMMON = "key1=val1\nkey2=val2\nkey3=val3"
DEV = "url=https://localhost"
INT = ""
TEST = "# This is a comment\nurl=https://testurl.vidar.com"
STAGE = "this is a bad property"
PROD = "url=https://produrl.vidar.com\ncreds=secret"

STANDARD_FILES: Dict[Kind, str] = {
    Kind.COMMON: COMMON,
    Kind.DEVELOPMENT: DEV,
    Kind.INTEGRATION: INT,
    Kind.TEST: TEST,
    Kind.STAGING: STAGE,
    Kind.PRODUCTION: PROD,
}


def write_env_files(directory: Path, contents: Optional[Dict[Kind, str]] = None) -> Path:
    """Write one ``<token>.env`` per entry (standard set when None)."""
    directory.mkdir(parents=True, exist_ok=True)
    for kind, text in (contents if contents is not None else STANDARD_FILES).items():
        (directory / kind.file_name()).write_text(text)
    return directory


@pytest.fixture
def env_dir(tmp_path: Path) -> Path:
    """Directory holding the standard set of property files."""
    return write_env_files(tmp_path / "envs")


@pytest.fixture
def make_env_dir(tmp_path: Path) -> Callable[[Dict[Kind, str]], Path]:
    """Factory for a directory holding custom property files."""
    counter = {"n": 0}

    def _make(contents: Dict[Kind, str]) -> Path:
        counter["n"] += 1
        return write_env_files(tmp_path / f"custom{counter['n']}", contents)

    return _make
