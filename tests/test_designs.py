"""Tests for the QSettings-backed design store."""

import json

import pytest

from quiltdesigner.engine import Half, TriangleId, GridParams, PatternState
from quiltdesigner.storage import Design, DesignData, DesignStore, DesignFormatError


@pytest.fixture
def store(settings):
    return DesignStore(settings)


@pytest.fixture
def data():
    pattern = PatternState({TriangleId(0, 0, Half.RIGHT): "#ff0000",
                            TriangleId(2, 5, Half.LEFT): "#00ff00"})
    return DesignData.capture(pattern, GridParams("Twin", 3.0, 24, 26))


def good_record(design_id=1, name="Zig-zag"):
    return {
        "id": design_id,
        "name": name,
        "data": {
            "triangleColors": {"triangle-0-0-right": "#ff0000"},
            "selectedSize": "Twin",
            "triangleHeight": 3,
            "columns": 24,
            "rows": 26,
        },
        "date": "2024-01-01T12:00:00.000Z",
    }


class TestDesignData:
    """Tests for DesignData conversion."""

    def test_capture(self, data):
        """Test capturing a pattern writes text ids."""
        assert data.triangle_colors == {
            "triangle-0-0-right": "#ff0000",
            "triangle-2-5-left": "#00ff00",
        }
        assert data.grid_params() == GridParams("Twin", 3.0, 24, 26)

    def test_pattern(self, data):
        """Test the stored colors read back as a pattern."""
        pattern = data.pattern()
        assert pattern.get(TriangleId(2, 5, Half.LEFT)) == "#00ff00"
        assert len(pattern) == 2

    def test_record_keys(self, data):
        """Test the record uses the stored field names."""
        assert set(data.to_record()) == {"triangleColors", "selectedSize", "triangleHeight", "columns", "rows"}


class TestDesignRecord:
    """Tests for Design.from_record validation."""

    def test_valid(self):
        """Test a valid record converts."""
        design = Design.from_record(good_record())
        assert design.id == 1
        assert design.name == "Zig-zag"
        assert design.data.triangle_height == 3.0
        assert design.created.year == 2024

    @pytest.mark.parametrize("mutate", [
        lambda r: r.pop("id"),
        lambda r: r.update(id="1"),
        lambda r: r.update(name=""),
        lambda r: r.pop("date"),
        lambda r: r.update(data=[]),
        lambda r: r["data"].update(triangleColors={"triangle-0-0-up": "#ff0000"}),
        lambda r: r["data"].update(triangleColors={"triangle-0-0-right": 5}),
        lambda r: r["data"].update(triangleHeight=0),
        lambda r: r["data"].update(triangleHeight="3"),
        lambda r: r["data"].update(columns=2.5),
        lambda r: r["data"].pop("rows"),
        lambda r: r["data"].update(selectedSize=None),
    ])
    def test_malformed(self, mutate):
        """Test malformed records are rejected."""
        record = good_record()
        mutate(record)
        with pytest.raises(DesignFormatError):
            Design.from_record(record)


class TestDesignStore:
    """Tests for DesignStore."""

    def test_empty(self, store):
        """Test a fresh store has no designs."""
        assert store.designs() == []

    def test_save_and_list(self, store, data):
        """Test a saved design is listed with its data."""
        saved = store.save("My Quilt", data)
        designs = store.designs()
        assert len(designs) == 1
        assert designs[0].id == saved.id
        assert designs[0].name == "My Quilt"
        assert designs[0].data == data

    def test_stored_as_json_list(self, store, settings, data):
        """Test designs are kept as a JSON list under one key."""
        store.save("My Quilt", data)
        records = json.loads(settings.value("quiltDesigns"))
        assert isinstance(records, list)
        assert records[0]["data"]["triangleColors"]["triangle-0-0-right"] == "#ff0000"
        assert records[0]["date"].endswith("Z")

    def test_persists(self, store, settings, data, tmp_path, qapp):
        """Test designs survive reopening the settings file."""
        from PySide6 import QtCore

        store.save("My Quilt", data)
        reopened = QtCore.QSettings(str(tmp_path / "designs.ini"), QtCore.QSettings.IniFormat)
        assert [d.name for d in DesignStore(reopened).designs()] == ["My Quilt"]

    def test_ids_distinct(self, store, data):
        """Test quick successive saves get increasing ids."""
        ids = [store.save(f"Quilt {i}", data).id for i in range(5)]
        assert ids == sorted(ids)
        assert len(set(ids)) == 5

    def test_empty_name(self, store, data):
        """Test an empty name is refused."""
        with pytest.raises(ValueError):
            store.save("   ", data)
        assert store.designs() == []

    def test_name_trimmed(self, store, data):
        """Test surrounding whitespace is dropped from names."""
        assert store.save("  Stars  ", data).name == "Stars"

    def test_get(self, store, data):
        """Test fetching a design by id."""
        saved = store.save("My Quilt", data)
        assert store.get(saved.id).name == "My Quilt"
        with pytest.raises(KeyError):
            store.get(saved.id + 1000)

    def test_delete(self, store, data):
        """Test delete removes only the matching design."""
        first = store.save("First", data)
        second = store.save("Second", data)
        assert store.delete(first.id)
        assert [d.id for d in store.designs()] == [second.id]
        assert not store.delete(first.id)

    def test_corrupt_record_skipped(self, store, settings):
        """Test a corrupt record does not hide the others."""
        settings.setValue("quiltDesigns", json.dumps([{"id": "x"}, good_record(7)]))
        assert [d.id for d in store.designs()] == [7]

    def test_invalid_json(self, store, settings):
        """Test an unreadable value reads as no designs."""
        settings.setValue("quiltDesigns", "not json")
        assert store.designs() == []

    def test_custom_key(self, settings, data):
        """Test stores under different keys are independent."""
        DesignStore(settings, "a").save("A", data)
        assert DesignStore(settings, "b").designs() == []
