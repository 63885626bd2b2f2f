from __future__ import annotations

import json
import sys
from decimal import Decimal
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(scope="session")
def fixture_dir() -> Path:
    return ROOT / "tests" / "fixtures"


@pytest.fixture(scope="session")
def fixture_bytes(fixture_dir: Path):
    def _read(name: str) -> bytes:
        return (fixture_dir / name).read_bytes()

    return _read


@pytest.fixture(scope="session")
def fixture_loader(fixture_bytes):
    def _load(name: str) -> Any:
        return json.loads(fixture_bytes(name), parse_float=Decimal)

    return _load
