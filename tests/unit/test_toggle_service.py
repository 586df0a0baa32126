from __future__ import annotations
from unittest.mock import MagicMock

from sheet_toggles.errors import RowSourceError
from sheet_toggles.services.request import ToggleRequest
from sheet_toggles.services.toggles import STATUS_ERROR, STATUS_OK, get_toggles


def _source(rows=None, error=None):
    source = MagicMock()
    if error is not None:
        source.load_rows.side_effect = error
    else:
        source.load_rows.return_value = rows
    return source


def test_get_toggles_success(sample_rows):
    source = _source(rows=sample_rows)
    response = get_toggles(ToggleRequest(sheet_id="doc", names=("dark_mode", "missing")), source)
    assert response.status_code == STATUS_OK
    assert response.ok
    assert [t["name"] for t in response.body["toggles"]] == ["dark_mode"]
    assert isinstance(response.body["fetchedAt"], int)
    source.load_rows.assert_called_once_with("doc")


def test_get_toggles_row_source_failure_is_500():
    source = _source(error=RowSourceError("failed to load sheet doc: boom"))
    response = get_toggles(ToggleRequest(sheet_id="doc", names=("dark_mode",)), source)
    assert response.status_code == STATUS_ERROR
    assert not response.ok
    assert response.body == "RowSourceError: failed to load sheet doc: boom"


def test_get_toggles_missing_input_is_500_without_loading(sample_rows):
    source = _source(rows=sample_rows)
    response = get_toggles(ToggleRequest(sheet_id="", names=("dark_mode",)), source)
    assert response.status_code == STATUS_ERROR
    assert response.body.startswith("InvalidArgumentError:")
    source.load_rows.assert_not_called()


def test_get_toggles_blank_name_is_500(sample_rows):
    response = get_toggles(ToggleRequest(sheet_id="doc", names=("dark_mode", "")), _source(rows=sample_rows))
    assert response.status_code == STATUS_ERROR
