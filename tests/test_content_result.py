"""
Tests for the ContentResult variant
"""
import pytest

from joker.services import ContentKind, ContentResult


def test_joke_serializes_without_author():
    result = ContentResult.joke("Knock knock")

    assert result.to_dict() == {"content": "Knock knock", "type": "joke"}


def test_quote_serializes_with_author():
    result = ContentResult.quote("Be yourself.", "Oscar Wilde")

    assert result.to_dict() == {
        "content": "Be yourself.",
        "type": "quote",
        "author": "Oscar Wilde",
    }


def test_joke_with_author_is_rejected():
    with pytest.raises(ValueError):
        ContentResult(content="x", kind=ContentKind.JOKE, author="Someone")


def test_quote_without_author_is_rejected():
    with pytest.raises(ValueError):
        ContentResult(content="x", kind=ContentKind.QUOTE)


def test_kind_values():
    assert {k.value for k in ContentKind} == {"joke", "quote"}
