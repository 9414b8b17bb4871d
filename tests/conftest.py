from __future__ import annotations

from pathlib import Path

import pytest

from tests.fixtures.fakes import FakeOracle, FakeRunner


@pytest.fixture()
def temp_workspace(tmp_path: Path) -> Path:
    (tmp_path / "configs").mkdir(parents=True, exist_ok=True)
    return tmp_path


@pytest.fixture()
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture()
def fake_oracle() -> FakeOracle:
    return FakeOracle()
