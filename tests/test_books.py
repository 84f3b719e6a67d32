"""Tests for the Bible book catalog."""

import pytest

from bible_search.books import (
    BIBLE_BOOKS,
    SINGLE_CHAPTER_BOOK_IDS,
    BibleBook,
    get_book,
    get_book_at,
    next_book,
    previous_book,
    sorted_books,
)


class TestBibleBook:
    """Tests for BibleBook dataclass."""

    def test_book_creation(self):
        """Test creating a BibleBook with all fields."""
        book = BibleBook("ruth", "Ruth", "룻기", 4, 8)

        assert book.id == "ruth"
        assert book.name_en == "Ruth"
        assert book.name_kr == "룻기"
        assert book.chapter_count == 4
        assert book.order == 8
        assert book.is_old_testament
        assert not book.is_new_testament
        assert not book.is_single_chapter

    def test_name_by_language(self, genesis):
        """Test getting the name in each language."""
        assert genesis.name("kr") == "창세기"
        assert genesis.name("en") == "Genesis"
        assert genesis.name() == "창세기"

    def test_name_unsupported_language(self, genesis):
        """Test that unknown languages raise ValueError."""
        with pytest.raises(ValueError) as exc_info:
            genesis.name("jp")

        assert "Unsupported language" in str(exc_info.value)

    def test_book_is_immutable(self, genesis):
        """Test that catalog entries cannot be modified."""
        with pytest.raises(AttributeError):
            genesis.name_kr = "창세"


class TestCatalog:
    """Tests for the BIBLE_BOOKS catalog."""

    def test_catalog_size(self):
        """Test that the catalog holds 39 OT and 27 NT books."""
        assert len(BIBLE_BOOKS) == 66
        assert sum(book.is_old_testament for book in BIBLE_BOOKS) == 39
        assert sum(book.is_new_testament for book in BIBLE_BOOKS) == 27

    def test_catalog_is_in_canonical_order(self):
        """Test that orders run from 1 to 66 without gaps."""
        assert [book.order for book in BIBLE_BOOKS] == list(range(1, 67))

    def test_ids_are_unique(self):
        """Test that every book id is unique."""
        ids = [book.id for book in BIBLE_BOOKS]
        assert len(set(ids)) == len(ids)

    def test_single_chapter_books(self):
        """Test that the single-chapter set matches the chapter counts."""
        single = {book.id for book in BIBLE_BOOKS if book.is_single_chapter}
        assert single == SINGLE_CHAPTER_BOOK_IDS

    def test_known_books(self):
        """Test a few well-known entries."""
        assert get_book("psalms").chapter_count == 150
        assert get_book("matthew").name_kr == "마태복음"
        assert get_book("1samuel").name_en == "1 Samuel"


class TestLookup:
    """Tests for book lookup and navigation helpers."""

    def test_get_book(self, genesis):
        """Test lookup by id."""
        assert genesis.name_en == "Genesis"
        assert get_book("unknown") is None

    def test_get_book_at(self):
        """Test lookup by canonical order."""
        assert get_book_at(40).id == "matthew"
        assert get_book_at(0) is None
        assert get_book_at(67) is None

    def test_next_book(self, genesis, revelation):
        """Test moving forward through the canon."""
        assert next_book(genesis).id == "exodus"
        assert next_book(get_book("malachi")).id == "matthew"
        assert next_book(revelation) is None

    def test_previous_book(self, genesis, revelation):
        """Test moving backward through the canon."""
        assert previous_book(revelation).id == "jude"
        assert previous_book(get_book("matthew")).id == "malachi"
        assert previous_book(genesis) is None


class TestSortedBooks:
    """Tests for sorted_books function."""

    def test_canonical(self, sample_books):
        """Test canonical ordering."""
        result = sorted_books("canonical", books=sample_books)
        assert [book.order for book in result] == [1, 9, 31, 40, 43]

    def test_canonical_default_catalog(self):
        """Test that the full catalog is used by default."""
        result = sorted_books()
        assert result[0].id == "genesis"
        assert result[-1].id == "revelation"

    def test_alphabetical_korean(self):
        """Test Korean 가나다 ordering."""
        result = sorted_books("alphabetical", "kr")
        assert result[0].id == "galatians"
        assert result[-1].id == "hebrews"

        names = [book.name_kr for book in result]
        assert names.index("마가복음") < names.index("마태복음")

    def test_alphabetical_english(self):
        """Test English ordering with numbered books."""
        result = sorted_books("alphabetical", "en")
        names = [book.name_en for book in result]

        assert names[0] == "1 Chronicles"
        assert names[-1] == "Zephaniah"
        assert names.index("1 John") < names.index("2 John") < names.index("3 John")
        assert names.index("Acts") < names.index("Amos")

    def test_does_not_modify_input(self, sample_books):
        """Test that sorting returns a new list."""
        original = list(sample_books)
        sorted_books("alphabetical", "en", books=sample_books)
        assert sample_books == original

    def test_unsupported_sort_order(self):
        """Test that unknown sort orders raise ValueError."""
        with pytest.raises(ValueError) as exc_info:
            sorted_books("random")

        assert "Unsupported sort order" in str(exc_info.value)

    def test_unsupported_language(self):
        """Test that alphabetical sorting rejects unknown languages."""
        with pytest.raises(ValueError):
            sorted_books("alphabetical", "jp")
