"""Shared pytest fixtures for bible-search tests."""

import pytest

from bible_search.books import BibleBook, get_book


@pytest.fixture
def genesis():
    """The first book of the Bible."""
    return get_book("genesis")


@pytest.fixture
def revelation():
    """The last book of the Bible."""
    return get_book("revelation")


@pytest.fixture
def sample_books():
    """A small, out-of-order selection of books for search tests."""
    return [
        BibleBook("matthew", "Matthew", "마태복음", 28, 40),
        BibleBook("genesis", "Genesis", "창세기", 50, 1),
        BibleBook("1samuel", "1 Samuel", "사무엘상", 31, 9),
        BibleBook("john", "John", "요한복음", 21, 43),
        BibleBook("obadiah", "Obadiah", "오바댜", 1, 31),
    ]


@pytest.fixture(autouse=True)
def clear_language_env(monkeypatch):
    """Make sure the CLI language default is not taken from the caller's shell."""
    monkeypatch.delenv("BIBLE_SEARCH_LANGUAGE", raising=False)
