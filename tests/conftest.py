# Shared pytest fixtures
from __future__ import annotations
from pathlib import Path

import pandas as pd
import pytest

from sheet_toggles.logging.init import reset_logging
from sheet_toggles.models.row import SheetRow


@pytest.fixture(autouse=True)
def clean_logging():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def temp_workdir(tmp_path: Path, monkeypatch) -> Path:
    (tmp_path / "config").mkdir()
    (tmp_path / "data").mkdir()
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture()
def sample_records() -> list[dict[str, object]]:
    return [
        {"Key": "dark_mode", "Value": "true", "Group": "beta=20,internal"},
        {"Key": "new_checkout", "Value": "v2", "Group": "everyone"},
        {"Key": "broken", "Value": "1", "Group": ""},
        {"Key": "dark_mode", "Value": "false", "Group": "shadowed"},
    ]


@pytest.fixture()
def sample_rows(sample_records) -> list[SheetRow]:
    return [SheetRow.from_mapping(r) for r in sample_records]


def write_sheet(path: Path, records: list[dict[str, object]]) -> Path:
    df = pd.DataFrame(records)
    if path.suffix == ".csv":
        df.to_csv(path, index=False)
    else:
        with pd.ExcelWriter(path) as writer:
            df.to_excel(writer, sheet_name="Toggles", index=False)
    return path


@pytest.fixture()
def xlsx_sheet(temp_workdir: Path, sample_records) -> Path:
    return write_sheet(temp_workdir / "data" / "toggles.xlsx", sample_records)


@pytest.fixture()
def csv_sheet(temp_workdir: Path, sample_records) -> Path:
    return write_sheet(temp_workdir / "data" / "toggles.csv", sample_records)


@pytest.fixture()
def sheet_writer():
    return write_sheet
