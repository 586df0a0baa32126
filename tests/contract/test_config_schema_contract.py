from __future__ import annotations
import json

import jsonschema
import pytest
from jsonschema.exceptions import ValidationError

from sheet_toggles.config.loader import SCHEMA_PATH

"""Settings schema contract (config/toggles.yml)."""


@pytest.fixture()
def schema():
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


def test_empty_config_is_valid(schema):
    jsonschema.validate({}, schema)


def test_full_example_is_valid(schema):
    jsonschema.validate(
        {
            "source": {"type": "file", "path": "./data/toggles.xlsx"},
            "max_rows": 100,
            "server": {"host": "127.0.0.1", "port": 8080},
        },
        schema,
    )


@pytest.mark.parametrize(
    "config",
    [
        {"source": {"path": "./x.xlsx"}},
        {"source": {"type": "file"}},
        {"max_rows": 101},
        {"server": {"port": 0}},
        {"server": {"debug": True}},
    ],
)
def test_invalid_configs_rejected(schema, config):
    with pytest.raises(ValidationError):
        jsonschema.validate(config, schema)
