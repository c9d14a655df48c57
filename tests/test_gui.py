import pytest

from pablaide.gui import offset_to_index


def _parse(index):
    line, column = index.split(".")
    return int(line), int(column)


def test_start_of_text_is_first_line_first_column():
    assert offset_to_index("", 0) == "1.0"
    assert offset_to_index("hello\nworld", 0) == "1.0"


@pytest.mark.parametrize(
    "text, offset, expected",
    [
        ("abc", 2, "1.2"),
        ("ab\ncd", 3, "2.0"),
        ("ab\ncd", 5, "2.2"),
    ],
)
def test_known_indices(text, offset, expected):
    assert offset_to_index(text, offset) == expected


def test_indices_strictly_increase():
    text = "int x\n\n// note\n\"s\" end"
    positions = [_parse(offset_to_index(text, offset)) for offset in range(len(text) + 1)]
    assert all(a < b for a, b in zip(positions, positions[1:]))


def test_column_resets_after_each_newline():
    text = "one\ntwo\n\nthree"
    for offset, char in enumerate(text):
        if char == "\n":
            line_here, _ = _parse(offset_to_index(text, offset))
            line_next, column_next = _parse(offset_to_index(text, offset + 1))
            assert column_next == 0
            assert line_next == line_here + 1


def test_line_count_matches_number_of_lines():
    text = "a\nb\nc\nd"
    line, _ = _parse(offset_to_index(text, len(text)))
    assert line == len(text.split("\n"))


@pytest.mark.parametrize("offset", [-1, 6])
def test_offset_outside_text_is_rejected(offset):
    with pytest.raises(ValueError):
        offset_to_index("ab\ncd", offset)