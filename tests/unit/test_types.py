import pytest

from stamp.errors import InvalidKind, StampError
from stamp.types import NoteKind


@pytest.mark.parametrize(
    "text, expected",
    [
        ("daily", NoteKind.DAILY),
        ("Fleeting", NoteKind.FLEETING),
        ("  PROJECT ", NoteKind.PROJECT),
        ("voice", NoteKind.VOICE),
    ],
)
def test_parse_known_kinds(text, expected):
    assert NoteKind.parse(text) is expected


@pytest.mark.parametrize("text", ["weekly", "", "P", None])
def test_parse_unknown_kind(text):
    with pytest.raises(InvalidKind) as excinfo:
        NoteKind.parse(text)

    assert isinstance(excinfo.value, StampError)
    assert "unknown note type" in str(excinfo.value)
