"""Command line interface for Bible book search."""

import argparse
import os
import sys

from .books import LANGUAGES, SORT_ORDERS, BibleBook
from .korean import extract_initial_consonants
from .reference import parse_reference
from .search import search_books

DEFAULT_LANGUAGE = "kr"


def format_book(book: BibleBook, language: str) -> str:
    """Format a book as a single listing line."""
    other = book.name_en if language == "kr" else book.name_kr
    testament = "OT" if book.is_old_testament else "NT"
    return (
        f"{book.order:>2}. {book.name(language)} ({other}) "
        f"- {testament}, {book.chapter_count} chapter{'' if book.is_single_chapter else 's'}"
    )


def cmd_books(args):
    """Handle the books command."""
    try:
        for book in search_books("", sort_order=args.sort, language=args.language):
            print(format_book(book, args.language))
        return 0
    except Exception as e:
        print(f"Error during books: {e}", file=sys.stderr)
        return 1


def cmd_search(args):
    """Handle the search command."""
    try:
        results = search_books(args.query, sort_order=args.sort, language=args.language)

        if not results:
            print(f"No books match '{args.query}'")
            return 0

        for book in results:
            print(format_book(book, args.language))
        return 0
    except Exception as e:
        print(f"Error during search: {e}", file=sys.stderr)
        return 1


def cmd_chosung(args):
    """Handle the chosung command."""
    try:
        print(extract_initial_consonants(args.text))
        return 0
    except Exception as e:
        print(f"Error during chosung: {e}", file=sys.stderr)
        return 1


def cmd_ref(args):
    """Handle the ref command."""
    try:
        ref = parse_reference(args.text)

        if ref.book is None:
            print(f"No reference found in '{args.text}'")
            return 0

        location = ""
        if ref.chapter is not None:
            location = f" {ref.chapter}"
            if ref.verse is not None:
                location += f":{ref.verse}"

        print(f"{ref.book.name(args.language)}{location} ({ref.confidence} confidence)")
        if ref.alternatives:
            names = ", ".join(book.name(args.language) for book in ref.alternatives)
            print(f"Did you mean: {names}")
        return 0
    except Exception as e:
        print(f"Error during ref: {e}", file=sys.stderr)
        return 1


def _add_listing_options(parser, default_language):
    parser.add_argument(
        "--sort",
        choices=SORT_ORDERS,
        default="canonical",
        help="Order of the listed books (default: canonical)",
    )
    parser.add_argument(
        "--language",
        choices=LANGUAGES,
        default=default_language,
        help=f"Display language (default: {default_language}, env: BIBLE_SEARCH_LANGUAGE)",
    )


def main(argv=None):
    """Main CLI entry point."""
    default_language = os.getenv("BIBLE_SEARCH_LANGUAGE") or DEFAULT_LANGUAGE
    if default_language not in LANGUAGES:
        print(
            f"Warning: ignoring unsupported BIBLE_SEARCH_LANGUAGE={default_language!r}",
            file=sys.stderr,
        )
        default_language = DEFAULT_LANGUAGE

    parser = argparse.ArgumentParser(
        description="Bible search - Find Bible books by English or Korean name, "
        "including initial-consonant (초성) search"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Books command
    books_parser = subparsers.add_parser("books", help="List all books of the Bible")
    _add_listing_options(books_parser, default_language)

    # Search command
    search_parser = subparsers.add_parser("search", help="Search books by name")
    search_parser.add_argument(
        "query", type=str, help="Search query (e.g. 'gen', '창세', 'ㅊㅅㄱ', '차')"
    )
    _add_listing_options(search_parser, default_language)

    # Chosung command
    chosung_parser = subparsers.add_parser(
        "chosung", help="Print the initial consonants (초성) of a text"
    )
    chosung_parser.add_argument("text", type=str, help="Text to extract initial consonants from")

    # Ref command
    ref_parser = subparsers.add_parser(
        "ref", help="Parse a Bible reference (e.g. '요한복음 3장 16절', 'John 3:16')"
    )
    ref_parser.add_argument("text", type=str, help="Reference to parse")
    ref_parser.add_argument(
        "--language",
        choices=LANGUAGES,
        default=default_language,
        help=f"Display language (default: {default_language}, env: BIBLE_SEARCH_LANGUAGE)",
    )

    args = parser.parse_args(argv)

    if args.command == "books":
        return cmd_books(args)
    elif args.command == "search":
        return cmd_search(args)
    elif args.command == "chosung":
        return cmd_chosung(args)
    elif args.command == "ref":
        return cmd_ref(args)
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
