from __future__ import annotations
import dataclasses

import pytest

from sheet_toggles.models import RolloutGroup, SheetRow, Toggle, ToggleResult


def test_sheet_row_from_mapping_coerces_cells():
    row = SheetRow.from_mapping({"Key": "limit", "Value": 5.0, "Group": None, "Notes": "ignored"})
    assert row == SheetRow(key="limit", value="5", group="")


def test_sheet_row_from_mapping_keeps_fractional_and_bool_values():
    assert SheetRow.from_mapping({"Key": "k", "Value": 0.25, "Group": "g"}).value == "0.25"
    assert SheetRow.from_mapping({"Key": "k", "Value": True, "Group": "g"}).value == "true"


def test_sheet_row_from_mapping_missing_columns():
    row = SheetRow.from_mapping({"Key": "only_key"})
    assert row.value == ""
    assert row.group == ""


def test_models_are_frozen():
    group = RolloutGroup(name="beta", rollout_percentage=20)
    with pytest.raises(dataclasses.FrozenInstanceError):
        group.rollout_percentage = 50  # type: ignore[misc]


def test_toggle_result_to_dict_wire_shape():
    result = ToggleResult(
        toggles=(Toggle(name="dark_mode", value="true", groups=(RolloutGroup("beta", 20),)),),
        fetched_at=123,
    )
    assert result.to_dict() == {
        "toggles": [
            {"name": "dark_mode", "value": "true", "groups": [{"name": "beta", "rolloutPercentage": 20}]}
        ],
        "fetchedAt": 123,
    }


def test_empty_toggle_result():
    assert ToggleResult().to_dict() == {"toggles": [], "fetchedAt": 0}
