import pytest

from h3geo import config
from h3geo.errors import GeometryError, SchemaError


def test_defaults():
    settings = config.build_settings()
    assert settings == {
        "COORD_PRECISION": 6,
        "MAX_CELL_BNDRY_VERTS": 10,
        "LINKED_CYCLE_GUARD": True,
    }


def test_keys_are_normalized():
    settings = config.build_settings({" coord_precision ": 2})
    assert settings["COORD_PRECISION"] == 2


@pytest.mark.parametrize("params", [
    {"UNKNOWN": 1},
    {"MAX_CELL_BNDRY_VERTS": 12},
    {"COORD_PRECISION": -1},
    {"COORD_PRECISION": 2.5},
    {"COORD_PRECISION": True},
    {"LINKED_CYCLE_GUARD": "yes"},
    {3: 1},
])
def test_invalid_overrides_raise_schema_error(params):
    with pytest.raises(SchemaError):
        config.build_settings(params)


def test_configure_and_reset():
    config.configure({"COORD_PRECISION": 1})
    assert config.setting("coord_precision") == 1
    assert config.get_settings()["COORD_PRECISION"] == 1
    config.configure()
    assert config.setting("COORD_PRECISION") == 6


def test_failed_configure_keeps_active_settings():
    config.configure({"COORD_PRECISION": 4})
    with pytest.raises(SchemaError):
        config.configure({"COORD_PRECISION": "four"})
    assert config.setting("COORD_PRECISION") == 4


def test_get_settings_returns_copy():
    config.get_settings()["COORD_PRECISION"] = 99
    assert config.setting("COORD_PRECISION") == 6


def test_error_context_suffix():
    err = SchemaError("Unknown settings key.", {"key": "FOO"})
    assert isinstance(err, GeometryError)
    assert str(err) == "Unknown settings key. | key='FOO'"
    assert str(GeometryError("plain")) == "plain"
    long_ctx = GeometryError("long", {"value": "x" * 500})
    assert str(long_ctx).endswith("...")
