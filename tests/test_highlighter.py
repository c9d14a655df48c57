import pytest

from pablaide.highlighter import (
    COMMENT_FORMAT,
    KEYWORD_FORMAT,
    STRING_FORMAT,
    Span,
    SyntaxHighlighter,
    TextFormat,
)


@pytest.fixture
def highlighter():
    return SyntaxHighlighter()


def _texts(text, spans):
    return [text[s.start:s.end] for s in spans]


def test_keyword_span(highlighter):
    spans = highlighter.highlight_block("int x")
    assert spans == [Span(0, 3, KEYWORD_FORMAT)]


def test_keyword_format_is_bold():
    assert KEYWORD_FORMAT == TextFormat("#0000ff", True)
    assert COMMENT_FORMAT.bold is False


def test_word_boundary_required(highlighter):
    assert highlighter.highlight_block("integer") == []


def test_comment_after_keyword(highlighter):
    text = "print(x) // note"
    spans = highlighter.highlight_block(text)
    assert _texts(text, spans) == ["print", "// note"]
    assert [s.format for s in spans] == [KEYWORD_FORMAT, COMMENT_FORMAT]


def test_string_is_greedy(highlighter):
    text = 'x = "a" + "b"'
    spans = [s for s in highlighter.highlight_block(text) if s.format == STRING_FORMAT]
    assert _texts(text, spans) == ['"a" + "b"']


def test_duplicate_keyword_rule(highlighter):
    spans = highlighter.highlight_block("return")
    assert len(spans) == 2
    assert all(s.start == 0 and s.length == 6 for s in spans)


def test_multiword_keyword(highlighter):
    text = "else if"
    assert sorted(_texts(text, highlighter.highlight_block(text))) == ["else", "else if", "if"]


def test_hyphenated_keyword(highlighter):
    text = "ip-v4"
    assert sorted(_texts(text, highlighter.highlight_block(text))) == ["ip", "ip-v4"]


def test_non_ascii_letters_are_boundaries(highlighter):
    text = "йint"
    assert _texts(text, highlighter.highlight_block(text)) == ["int"]


def test_spans_lie_within_text(highlighter):
    text = 'class A { void f() { print("hi"); } } // end'
    for span in highlighter.highlight_block(text):
        assert 0 <= span.start < span.end <= len(text)