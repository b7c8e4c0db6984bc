"""Fixtures for record source tests."""

from pathlib import Path

import pytest

from tests.shared.fixtures.csv_files import write_data_dir


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    return write_data_dir(tmp_path)
