"""Tests for the source cursor."""

from jsonreflow.engine.cursor import Cursor


def test_empty_source_is_at_end():
    cursor = Cursor("")
    assert cursor.at_end()
    assert not cursor.more()
    assert cursor.peek() == ""


def test_peek_does_not_advance():
    cursor = Cursor("ab")
    assert cursor.peek() == "a"
    assert cursor.peek() == "a"
    assert cursor.offset == 0


def test_next_char_advances_by_code_point():
    """Multi-byte characters are consumed as a single unit."""
    cursor = Cursor("é€😀x")
    assert [cursor.next_char() for _ in range(3)] == ["é", "€", "😀"]
    assert cursor.peek() == "x"
    assert cursor.offset == 3


def test_skip_and_skip_char():
    cursor = Cursor("abcdef")
    cursor.skip_char()
    cursor.skip(3)
    assert cursor.peek() == "e"


def test_is_next_prefix():
    cursor = Cursor("// comment")
    assert cursor.is_next_prefix("//")
    assert not cursor.is_next_prefix("/*")
    # An empty prefix never matches, so disabled comment syntax is never recognized
    assert not cursor.is_next_prefix("")


def test_is_next_prefix_at_end():
    cursor = Cursor("/")
    cursor.skip_char()
    assert not cursor.is_next_prefix("/")


def test_character_classes():
    assert Cursor(" x").is_next_space()
    assert Cursor("\tx").is_next_space()
    assert Cursor("\vx").is_next_space()
    assert Cursor("\rx").is_next_space()
    assert not Cursor("x").is_next_space()

    assert Cursor(",").is_next_punctuation()
    assert Cursor(":").is_next_punctuation()
    assert not Cursor(";").is_next_punctuation()

    assert Cursor("}").is_next_closing()
    assert Cursor("]").is_next_closing()
    assert not Cursor(")").is_next_closing()

    for char in '{}[],:"':
        assert Cursor(char).is_next_terminal_char()
    assert not Cursor("1").is_next_terminal_char()


def test_character_classes_at_end():
    cursor = Cursor("")
    assert not cursor.is_next_space()
    assert not cursor.is_next_punctuation()
    assert not cursor.is_next_closing()
    assert not cursor.is_next_terminal_char()
