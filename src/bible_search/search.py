"""Filter Bible books by a typed query in English or Korean."""

from .books import BIBLE_BOOKS, BibleBook, sorted_books
from .korean import matches, trim_query


def book_matches(query: str, book: BibleBook) -> bool:
    """
    Check whether a book matches a search query.

    The English name is matched case-insensitively as a substring. The Korean
    name supports initial-consonant ("ㅊㅅㄱ") and partial-syllable ("차")
    queries.

    Args:
        query: Search query; an empty or blank query matches every book
        book: Book to test

    Returns:
        True if either name matches
    """
    query = trim_query(query)
    if not query:
        return True

    return query.casefold() in book.name_en.casefold() or matches(query, book.name_kr)


def search_books(
    query: str,
    books: list[BibleBook] | tuple[BibleBook, ...] | None = None,
    sort_order: str = "canonical",
    language: str = "kr",
) -> list[BibleBook]:
    """
    Search books by name.

    Args:
        query: Search query (e.g. "gen", "창세", "ㅁㅌ", "차")
        books: Books to search. Defaults to the full catalog
        sort_order: "canonical" or "alphabetical"
        language: Language used for alphabetical ordering

    Returns:
        Matching books in the requested order
    """
    if books is None:
        books = BIBLE_BOOKS

    return [
        book
        for book in sorted_books(sort_order=sort_order, language=language, books=books)
        if book_matches(query, book)
    ]
