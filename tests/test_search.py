"""Tests for Bible book search."""

import pytest

from bible_search.search import book_matches, search_books


def _ids(books):
    return [book.id for book in books]


class TestBookMatches:
    """Tests for book_matches function."""

    def test_english_name_case_insensitive(self, genesis):
        """Test matching the English name regardless of case."""
        assert book_matches("gen", genesis)
        assert book_matches("GENESIS", genesis)
        assert not book_matches("exo", genesis)

    def test_korean_name(self, genesis):
        """Test matching the Korean name with every search strategy."""
        assert book_matches("창세", genesis)
        assert book_matches("ㅊㅅㄱ", genesis)
        assert book_matches("차", genesis)
        assert not book_matches("처", genesis)

    def test_query_trimmed_for_both_names(self, genesis):
        """Test that surrounding spaces are ignored for English and Korean names."""
        assert book_matches("gen ", genesis)
        assert book_matches(" 창세 ", genesis)
        assert not book_matches("gen\n", genesis)

    @pytest.mark.parametrize("query", ["", "  "])
    def test_blank_query(self, genesis, query):
        """Test that blank queries match every book."""
        assert book_matches(query, genesis)


class TestSearchBooks:
    """Tests for search_books function."""

    def test_initial_consonant_search(self):
        """Test finding Matthew by initial consonants."""
        assert _ids(search_books("ㅁㅌ")) == ["matthew"]

    def test_english_search(self):
        """Test finding books by English name."""
        assert _ids(search_books("gen")) == ["genesis"]
        assert _ids(search_books("john")) == ["john", "1john", "2john", "3john"]

    def test_partial_syllable_search(self):
        """Test finding books while the last syllable is still being typed."""
        expected = ["john", "1john", "2john", "3john", "revelation"]
        assert _ids(search_books("요한")) == expected
        assert _ids(search_books("요하")) == expected
        assert _ids(search_books("차")) == ["genesis"]

    def test_initial_consonant_search_across_books(self):
        """Test a consonant query that matches several books."""
        assert _ids(search_books("ㅇㅎ")) == [
            "joshua",
            "2samuel",
            "john",
            "1john",
            "2john",
            "3john",
            "revelation",
        ]

    def test_empty_query_returns_all(self):
        """Test that an empty query returns the whole catalog."""
        assert len(search_books("")) == 66

    def test_no_results(self):
        """Test a query that matches nothing."""
        assert search_books("zzz") == []
        assert search_books("ㅋㅋ") == []

    def test_custom_book_list(self, sample_books):
        """Test searching within a given list of books."""
        assert _ids(search_books("ㅅ", books=sample_books)) == ["genesis", "1samuel"]

    def test_alphabetical_order(self, sample_books):
        """Test that results follow the requested ordering."""
        result = search_books("", books=sample_books, sort_order="alphabetical", language="kr")
        assert [book.name_kr for book in result] == [
            "마태복음",
            "사무엘상",
            "오바댜",
            "요한복음",
            "창세기",
        ]
