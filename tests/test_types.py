from pysuals.lsp.types import Location, Position, Range, TextEdit, to_json


def _range(line):
    return Range(Position(line, 0), Position(line, 4))


def test_position_to_json():
    assert to_json(Position(1, 2)) == {"line": 1, "character": 2}


def test_location_nested():
    loc = Location("file:///a.pys", _range(3))
    assert to_json(loc) == {
        "uri": "file:///a.pys",
        "range": {
            "start": {"line": 3, "character": 0},
            "end": {"line": 3, "character": 4},
        },
    }


def test_text_edit_uses_field_names():
    data = to_json(TextEdit(_range(0), "abc"))
    assert set(data) == {"range", "new_text"}
    assert data["new_text"] == "abc"


def test_lists_dicts_and_none():
    edits = {"file:///x": [TextEdit(_range(1), "y")]}
    data = to_json([edits, None, 5])
    assert data[1] is None
    assert data[2] == 5
    assert data[0]["file:///x"][0]["range"]["start"]["line"] == 1