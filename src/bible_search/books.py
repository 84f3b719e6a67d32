"""Catalog of the 66 books of the Protestant Bible with English and Korean names."""

import re
from dataclasses import dataclass

LANGUAGES = ("kr", "en")
SORT_ORDERS = ("canonical", "alphabetical")

OLD_TESTAMENT_BOOK_COUNT = 39


@dataclass(frozen=True)
class BibleBook:
    """A single book of the Bible."""

    id: str
    name_en: str
    name_kr: str
    chapter_count: int
    order: int

    @property
    def is_single_chapter(self) -> bool:
        return self.chapter_count == 1

    @property
    def is_old_testament(self) -> bool:
        return self.order <= OLD_TESTAMENT_BOOK_COUNT

    @property
    def is_new_testament(self) -> bool:
        return self.order > OLD_TESTAMENT_BOOK_COUNT

    def name(self, language: str = "kr") -> str:
        """
        Get the book name in the given language.

        Args:
            language: "kr" for Korean or "en" for English

        Returns:
            The book name

        Raises:
            ValueError: If the language is not supported
        """
        if language == "kr":
            return self.name_kr
        if language == "en":
            return self.name_en
        raise ValueError(f"Unsupported language: {language!r} (expected one of {LANGUAGES})")


BIBLE_BOOKS: tuple[BibleBook, ...] = (
    # Old Testament
    BibleBook("genesis", "Genesis", "창세기", 50, 1),
    BibleBook("exodus", "Exodus", "출애굽기", 40, 2),
    BibleBook("leviticus", "Leviticus", "레위기", 27, 3),
    BibleBook("numbers", "Numbers", "민수기", 36, 4),
    BibleBook("deuteronomy", "Deuteronomy", "신명기", 34, 5),
    BibleBook("joshua", "Joshua", "여호수아", 24, 6),
    BibleBook("judges", "Judges", "사사기", 21, 7),
    BibleBook("ruth", "Ruth", "룻기", 4, 8),
    BibleBook("1samuel", "1 Samuel", "사무엘상", 31, 9),
    BibleBook("2samuel", "2 Samuel", "사무엘하", 24, 10),
    BibleBook("1kings", "1 Kings", "열왕기상", 22, 11),
    BibleBook("2kings", "2 Kings", "열왕기하", 25, 12),
    BibleBook("1chronicles", "1 Chronicles", "역대상", 29, 13),
    BibleBook("2chronicles", "2 Chronicles", "역대하", 36, 14),
    BibleBook("ezra", "Ezra", "에스라", 10, 15),
    BibleBook("nehemiah", "Nehemiah", "느헤미야", 13, 16),
    BibleBook("esther", "Esther", "에스더", 10, 17),
    BibleBook("job", "Job", "욥기", 42, 18),
    BibleBook("psalms", "Psalms", "시편", 150, 19),
    BibleBook("proverbs", "Proverbs", "잠언", 31, 20),
    BibleBook("ecclesiastes", "Ecclesiastes", "전도서", 12, 21),
    BibleBook("songofsolomon", "Song of Solomon", "아가", 8, 22),
    BibleBook("isaiah", "Isaiah", "이사야", 66, 23),
    BibleBook("jeremiah", "Jeremiah", "예레미야", 52, 24),
    BibleBook("lamentations", "Lamentations", "예레미야애가", 5, 25),
    BibleBook("ezekiel", "Ezekiel", "에스겔", 48, 26),
    BibleBook("daniel", "Daniel", "다니엘", 12, 27),
    BibleBook("hosea", "Hosea", "호세아", 14, 28),
    BibleBook("joel", "Joel", "요엘", 3, 29),
    BibleBook("amos", "Amos", "아모스", 9, 30),
    BibleBook("obadiah", "Obadiah", "오바댜", 1, 31),
    BibleBook("jonah", "Jonah", "요나", 4, 32),
    BibleBook("micah", "Micah", "미가", 7, 33),
    BibleBook("nahum", "Nahum", "나훔", 3, 34),
    BibleBook("habakkuk", "Habakkuk", "하박국", 3, 35),
    BibleBook("zephaniah", "Zephaniah", "스바냐", 3, 36),
    BibleBook("haggai", "Haggai", "학개", 2, 37),
    BibleBook("zechariah", "Zechariah", "스가랴", 14, 38),
    BibleBook("malachi", "Malachi", "말라기", 4, 39),
    # New Testament
    BibleBook("matthew", "Matthew", "마태복음", 28, 40),
    BibleBook("mark", "Mark", "마가복음", 16, 41),
    BibleBook("luke", "Luke", "누가복음", 24, 42),
    BibleBook("john", "John", "요한복음", 21, 43),
    BibleBook("acts", "Acts", "사도행전", 28, 44),
    BibleBook("romans", "Romans", "로마서", 16, 45),
    BibleBook("1corinthians", "1 Corinthians", "고린도전서", 16, 46),
    BibleBook("2corinthians", "2 Corinthians", "고린도후서", 13, 47),
    BibleBook("galatians", "Galatians", "갈라디아서", 6, 48),
    BibleBook("ephesians", "Ephesians", "에베소서", 6, 49),
    BibleBook("philippians", "Philippians", "빌립보서", 4, 50),
    BibleBook("colossians", "Colossians", "골로새서", 4, 51),
    BibleBook("1thessalonians", "1 Thessalonians", "데살로니가전서", 5, 52),
    BibleBook("2thessalonians", "2 Thessalonians", "데살로니가후서", 3, 53),
    BibleBook("1timothy", "1 Timothy", "디모데전서", 6, 54),
    BibleBook("2timothy", "2 Timothy", "디모데후서", 4, 55),
    BibleBook("titus", "Titus", "디도서", 3, 56),
    BibleBook("philemon", "Philemon", "빌레몬서", 1, 57),
    BibleBook("hebrews", "Hebrews", "히브리서", 13, 58),
    BibleBook("james", "James", "야고보서", 5, 59),
    BibleBook("1peter", "1 Peter", "베드로전서", 5, 60),
    BibleBook("2peter", "2 Peter", "베드로후서", 3, 61),
    BibleBook("1john", "1 John", "요한일서", 5, 62),
    BibleBook("2john", "2 John", "요한이서", 1, 63),
    BibleBook("3john", "3 John", "요한삼서", 1, 64),
    BibleBook("jude", "Jude", "유다서", 1, 65),
    BibleBook("revelation", "Revelation", "요한계시록", 22, 66),
)

SINGLE_CHAPTER_BOOK_IDS = frozenset({"obadiah", "philemon", "2john", "3john", "jude"})

_BOOKS_BY_ID = {book.id: book for book in BIBLE_BOOKS}
_BOOKS_BY_ORDER = {book.order: book for book in BIBLE_BOOKS}


def get_book(book_id: str) -> BibleBook | None:
    """Look up a book by its id (e.g. "genesis", "1samuel")."""
    return _BOOKS_BY_ID.get(book_id)


def get_book_at(order: int) -> BibleBook | None:
    """Look up a book by its canonical position (1 = Genesis, 66 = Revelation)."""
    return _BOOKS_BY_ORDER.get(order)


def next_book(book: BibleBook) -> BibleBook | None:
    """Get the book after the given one, or None after Revelation."""
    return get_book_at(book.order + 1)


def previous_book(book: BibleBook) -> BibleBook | None:
    """Get the book before the given one, or None before Genesis."""
    return get_book_at(book.order - 1)


def _natural_key(name: str) -> list:
    # "2 Kings" sorts before "10 ...", case-insensitive
    return [int(part) if part.isdigit() else part.casefold() for part in re.split(r"(\d+)", name)]


def sorted_books(
    sort_order: str = "canonical",
    language: str = "kr",
    books: list[BibleBook] | tuple[BibleBook, ...] | None = None,
) -> list[BibleBook]:
    """
    Sort books canonically or alphabetically.

    Korean names are compared by code point, which for precomposed syllables
    is 가나다 order. English names use a case-insensitive natural ordering.

    Args:
        sort_order: "canonical" or "alphabetical"
        language: Language whose names are used for alphabetical sorting
        books: Books to sort. Defaults to the full catalog

    Returns:
        New list of sorted books

    Raises:
        ValueError: If the sort order or language is not supported
    """
    if books is None:
        books = BIBLE_BOOKS

    if sort_order == "canonical":
        return sorted(books, key=lambda book: book.order)

    if sort_order == "alphabetical":
        if language == "kr":
            return sorted(books, key=lambda book: book.name_kr)
        if language == "en":
            return sorted(books, key=lambda book: _natural_key(book.name_en))
        raise ValueError(f"Unsupported language: {language!r} (expected one of {LANGUAGES})")

    raise ValueError(f"Unsupported sort order: {sort_order!r} (expected one of {SORT_ORDERS})")
