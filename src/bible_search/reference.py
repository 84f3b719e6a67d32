"""Parse spoken or typed Bible references such as "요한복음 3장 16절" or "John 3:16"."""

import re
from dataclasses import dataclass, field

from rapidfuzz import process
from rapidfuzz.distance import Levenshtein

from .books import BIBLE_BOOKS, BibleBook, get_book

HIGH = "high"  # Exact alias match
MEDIUM = "medium"  # Prefix/contains match or one edit away
LOW = "low"  # Uncertain or no book found

# Aliases on top of ids, full names, 3-letter English prefixes and 2-syllable Korean prefixes
EXTRA_ALIASES = {
    # English
    "gen": "genesis",
    "ex": "exodus", "exod": "exodus",
    "lev": "leviticus",
    "num": "numbers",
    "deut": "deuteronomy",
    "josh": "joshua",
    "judg": "judges",
    "1 sam": "1samuel", "1sam": "1samuel", "first samuel": "1samuel",
    "2 sam": "2samuel", "2sam": "2samuel", "second samuel": "2samuel",
    "1 kings": "1kings", "1kings": "1kings", "first kings": "1kings",
    "2 kings": "2kings", "2kings": "2kings", "second kings": "2kings",
    "1 chron": "1chronicles", "1chron": "1chronicles",
    "2 chron": "2chronicles", "2chron": "2chronicles",
    "neh": "nehemiah",
    "esth": "esther",
    "ps": "psalms", "psalm": "psalms", "psa": "psalms",
    "prov": "proverbs", "pro": "proverbs",
    "eccl": "ecclesiastes", "ecc": "ecclesiastes",
    "song": "songofsolomon", "song of songs": "songofsolomon", "sos": "songofsolomon",
    "isa": "isaiah",
    "jer": "jeremiah",
    "lam": "lamentations",
    "ezek": "ezekiel", "eze": "ezekiel",
    "dan": "daniel",
    "hos": "hosea",
    "joe": "joel",
    "amo": "amos",
    "obad": "obadiah", "oba": "obadiah",
    "jon": "jonah",
    "mic": "micah",
    "nah": "nahum",
    "hab": "habakkuk",
    "zeph": "zephaniah", "zep": "zephaniah",
    "hag": "haggai",
    "zech": "zechariah", "zec": "zechariah",
    "mal": "malachi",
    "matt": "matthew", "mat": "matthew",
    "mar": "mark", "mk": "mark",
    "luk": "luke", "lk": "luke",
    "joh": "john", "jn": "john",
    "act": "acts",
    "rom": "romans",
    "1 cor": "1corinthians", "1cor": "1corinthians", "first corinthians": "1corinthians",
    "2 cor": "2corinthians", "2cor": "2corinthians", "second corinthians": "2corinthians",
    "gal": "galatians",
    "eph": "ephesians",
    "phil": "philippians", "php": "philippians",
    "col": "colossians",
    "1 thess": "1thessalonians", "1thess": "1thessalonians",
    "2 thess": "2thessalonians", "2thess": "2thessalonians",
    "1 tim": "1timothy", "1tim": "1timothy", "first timothy": "1timothy",
    "2 tim": "2timothy", "2tim": "2timothy", "second timothy": "2timothy",
    "tit": "titus",
    "phm": "philemon", "phlm": "philemon",
    "heb": "hebrews",
    "jas": "james", "jam": "james",
    "1 pet": "1peter", "1pet": "1peter", "first peter": "1peter",
    "2 pet": "2peter", "2pet": "2peter", "second peter": "2peter",
    "1 jn": "1john", "1jn": "1john", "first john": "1john",
    "2 jn": "2john", "2jn": "2john", "second john": "2john",
    "3 jn": "3john", "3jn": "3john", "third john": "3john",
    "jud": "jude",
    "rev": "revelation", "revelations": "revelation",
    # Korean names without 상/하 or 전/후 default to the first book
    "사무엘": "1samuel",
    "열왕기": "1kings",
    "역대": "1chronicles",
    "고린도": "1corinthians",
    "데살로니가": "1thessalonians",
    "디모데": "1timothy",
    "베드로": "1peter",
    "요한서": "1john",
    # Korean short forms
    "창세": "genesis",
    "출애굽": "exodus", "출": "exodus",
    "레위": "leviticus",
    "민수": "numbers",
    "신명": "deuteronomy",
    "여호수아": "joshua", "여호": "joshua",
    "사사": "judges",
    "룻": "ruth",
    "사무엘상": "1samuel", "삼상": "1samuel",
    "사무엘하": "2samuel", "삼하": "2samuel",
    "열왕기상": "1kings", "왕상": "1kings",
    "열왕기하": "2kings", "왕하": "2kings",
    "역대상": "1chronicles", "대상": "1chronicles",
    "역대하": "2chronicles", "대하": "2chronicles",
    "에스라": "ezra", "스라": "ezra",
    "느헤미야": "nehemiah", "느혜": "nehemiah",
    "에스더": "esther",
    "욥": "job",
    "시편": "psalms", "시": "psalms",
    "잠언": "proverbs", "잠": "proverbs",
    "전도서": "ecclesiastes", "전도": "ecclesiastes",
    "아가": "songofsolomon",
    "이사야": "isaiah", "사야": "isaiah",
    "예레미야": "jeremiah", "렘": "jeremiah",
    "예레미야애가": "lamentations", "애가": "lamentations",
    "에스겔": "ezekiel", "겔": "ezekiel",
    "다니엘": "daniel", "단": "daniel",
    "호세아": "hosea",
    "요엘": "joel",
    "아모스": "amos",
    "오바댜": "obadiah",
    "요나": "jonah",
    "미가": "micah",
    "나훔": "nahum",
    "하박국": "habakkuk",
    "스바냐": "zephaniah",
    "학개": "haggai",
    "스가랴": "zechariah",
    "말라기": "malachi",
    "마태복음": "matthew", "마태": "matthew", "마": "matthew",
    "마가복음": "mark", "마가": "mark", "막": "mark",
    "누가복음": "luke", "누가": "luke", "눅": "luke",
    "요한복음": "john", "요한": "john", "요": "john",
    "사도행전": "acts", "행전": "acts", "행": "acts",
    "로마서": "romans", "롬": "romans",
    "고린도전서": "1corinthians", "고전": "1corinthians",
    "고린도후서": "2corinthians", "고후": "2corinthians",
    "갈라디아서": "galatians", "갈": "galatians",
    "에베소서": "ephesians", "엡": "ephesians",
    "빌립보서": "philippians", "빌": "philippians",
    "골로새서": "colossians", "골": "colossians",
    "데살로니가전서": "1thessalonians", "살전": "1thessalonians",
    "데살로니가후서": "2thessalonians", "살후": "2thessalonians",
    "디모데전서": "1timothy", "딤전": "1timothy",
    "디모데후서": "2timothy", "딤후": "2timothy",
    "디도서": "titus", "딛": "titus",
    "빌레몬서": "philemon", "몬": "philemon",
    "히브리서": "hebrews", "히": "hebrews",
    "야고보서": "james", "약": "james",
    "베드로전서": "1peter", "벧전": "1peter",
    "베드로후서": "2peter", "벧후": "2peter",
    "요한일서": "1john", "요일": "1john",
    "요한이서": "2john", "요이": "2john",
    "요한삼서": "3john", "요삼": "3john",
    "유다서": "jude", "유": "jude",
    "요한계시록": "revelation", "계시록": "revelation", "계": "revelation",
}

KOREAN_NUMBERS = {
    "일": 1, "이": 2, "삼": 3, "사": 4, "오": 5,
    "육": 6, "칠": 7, "팔": 8, "구": 9, "십": 10,
    "십일": 11, "십이": 12, "십삼": 13, "십사": 14, "십오": 15,
    "십육": 16, "십칠": 17, "십팔": 18, "십구": 19, "이십": 20,
    "하나": 1, "둘": 2, "셋": 3, "넷": 4, "다섯": 5,
    "여섯": 6, "일곱": 7, "여덟": 8, "아홉": 9, "열": 10,
}

ENGLISH_NUMBERS = {
    "one": 1, "two": 2, "three": 3, "four": 4, "five": 5,
    "six": 6, "seven": 7, "eight": 8, "nine": 9, "ten": 10,
    "eleven": 11, "twelve": 12, "thirteen": 13, "fourteen": 14, "fifteen": 15,
    "sixteen": 16, "seventeen": 17, "eighteen": 18, "nineteen": 19, "twenty": 20,
    "first": 1, "second": 2, "third": 3,
}

KOREAN_FILLER_PHRASES = ("보여줘", "보여주세요", "찾아줘", "찾아주세요", "로 가줘", "가줘")
_KOREAN_PARTICLES = re.compile(r"(으로|의|을|를)(?=\s|$)")
_ENGLISH_FILLERS = re.compile(r"\b(show me|go to|find|take me to|please|the|book of)\b")

_HANGUL_PATTERN = re.compile("[\uac00-\ud7af\u1100-\u11ff]")
_KOREAN_NUMBER_TOKEN = re.compile(r"^(\D+?)(장|편|절)?$")

# (pattern, has verse group); group 1 = book, 2 = chapter, 3 = verse
KOREAN_PATTERNS = [
    (re.compile(r"(.+?)\s*(\d+)\s*장\s*(\d+)\s*절"), True),
    (re.compile(r"(.+?)\s*(\d+)\s*편\s*(\d+)\s*절"), True),
    (re.compile(r"(.+?)\s*(\d+)\s*장"), False),
    (re.compile(r"(.+?)\s*(\d+)\s*편"), False),
    (re.compile(r"(.+?)\s+(\d+)\s*[:\s]\s*(\d+)"), True),
    (re.compile(r"(.+?)\s+(\d+)$"), False),
]

ENGLISH_PATTERNS = [
    (re.compile(r"(.+?)\s+(\d+)\s*:\s*(\d+)"), True),
    (re.compile(r"(.+?)\s+chapter\s+(\d+)\s+verse\s+(\d+)"), True),
    (re.compile(r"(.+?)\s+(\d+)\s+(\d+)$"), True),
    (re.compile(r"(.+?)\s+(\d+)$"), False),
    (re.compile(r"(.+?)\s+chapter\s+(\d+)"), False),
]

MAX_ALTERNATIVES = 5


@dataclass
class BookMatch:
    """Result of looking up a book name, with other candidates when ambiguous."""

    book: BibleBook | None
    confidence: str
    alternatives: list[BibleBook] = field(default_factory=list)


@dataclass
class ParsedReference:
    """A Bible reference parsed from free text."""

    book: BibleBook | None
    chapter: int | None
    verse: int | None
    language: str
    raw_text: str
    confidence: str
    alternatives: list[BibleBook] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.book is not None and self.chapter is not None

    @property
    def is_complete(self) -> bool:
        return self.is_valid and self.verse is not None

    @property
    def is_ambiguous(self) -> bool:
        return bool(self.alternatives)


def build_alias_map() -> dict[str, str]:
    """
    Build the mapping from every accepted book alias to a book id.

    Returns:
        Dictionary mapping lowercase aliases (e.g. "gen", "창세", "삼상") to book ids
    """
    aliases = {}
    for book in BIBLE_BOOKS:
        aliases[book.id.lower()] = book.id
        aliases[book.name_en.lower()] = book.id
        aliases[book.name_kr] = book.id
        aliases[book.name_en[:3].lower()] = book.id
        if len(book.name_kr) >= 2:
            aliases[book.name_kr[:2]] = book.id

    aliases.update(EXTRA_ALIASES)
    return aliases


BOOK_ALIASES = build_alias_map()


def detect_language(text: str) -> str:
    """Return "kr" if the text contains Hangul, otherwise "en"."""
    return "kr" if _HANGUL_PATTERN.search(text) else "en"


def normalize_text(text: str, language: str) -> str:
    """Lowercase, drop filler words and collapse whitespace."""
    normalized = text.lower()

    if language == "kr":
        for phrase in KOREAN_FILLER_PHRASES:
            normalized = normalized.replace(phrase, " ")
        normalized = _KOREAN_PARTICLES.sub(" ", normalized)
    else:
        normalized = _ENGLISH_FILLERS.sub(" ", normalized)

    return " ".join(normalized.split())


def convert_number_words(text: str, language: str) -> str:
    """
    Replace whole-word numbers ("삼장", "sixteen") with digits.

    Korean number words may carry a 장/편/절 suffix, which is dropped.
    """
    numbers = KOREAN_NUMBERS if language == "kr" else ENGLISH_NUMBERS

    tokens = []
    for token in text.split():
        value = numbers.get(token)
        if value is None and language == "kr":
            match = _KOREAN_NUMBER_TOKEN.match(token)
            if match:
                value = numbers.get(match.group(1))
        tokens.append(str(value) if value is not None else token)

    return " ".join(tokens)


def find_book(text: str) -> BookMatch:
    """
    Find the book a name or abbreviation refers to.

    Tries, in order: an exact alias, aliases sharing a prefix with the text,
    aliases contained in (or containing) the text, and finally the aliases
    within a Levenshtein distance of max(2, len(text) // 2). Candidates from
    the same step are ordered canonically; the first is the match and the
    rest are alternatives.

    Args:
        text: Book name as typed or spoken

    Returns:
        BookMatch with the best book (or None) and a confidence level
    """
    search_text = text.lower().strip()
    if not search_text:
        return BookMatch(book=None, confidence=LOW)

    if search_text in BOOK_ALIASES:
        return BookMatch(book=get_book(BOOK_ALIASES[search_text]), confidence=HIGH)

    for predicate in (
        lambda alias: alias.startswith(search_text) or search_text.startswith(alias),
        lambda alias: search_text in alias or alias in search_text,
    ):
        book_ids = {book_id for alias, book_id in BOOK_ALIASES.items() if predicate(alias)}
        if book_ids:
            candidates = sorted((get_book(book_id) for book_id in book_ids), key=lambda b: b.order)
            return BookMatch(book=candidates[0], confidence=MEDIUM, alternatives=candidates[1:])

    aliases = list(BOOK_ALIASES)
    max_distance = max(2, len(search_text) // 2)
    scored = process.extract(
        search_text,
        aliases,
        scorer=Levenshtein.distance,
        score_cutoff=max_distance,
        limit=None,
    )

    best_distance: dict[str, int] = {}
    for alias, distance, _ in scored:
        book_id = BOOK_ALIASES[alias]
        if distance < best_distance.get(book_id, max_distance + 1):
            best_distance[book_id] = distance

    if not best_distance:
        return BookMatch(book=None, confidence=LOW)

    ranked = sorted(
        ((distance, get_book(book_id)) for book_id, distance in best_distance.items()),
        key=lambda item: (item[0], item[1].order),
    )
    distance, book = ranked[0]
    alternatives = [other for other_distance, other in ranked[1:] if other_distance <= distance + 1]

    if distance == 0:
        confidence = HIGH
    elif distance <= 1:
        confidence = MEDIUM
    else:
        confidence = LOW

    return BookMatch(book=book, confidence=confidence, alternatives=alternatives[:MAX_ALTERNATIVES])


def _reference(match: BookMatch, chapter, verse, language, raw_text) -> ParsedReference:
    return ParsedReference(
        book=match.book,
        chapter=chapter,
        verse=verse,
        language=language,
        raw_text=raw_text,
        confidence=match.confidence if match.book is not None else LOW,
        alternatives=match.alternatives,
    )


def _parse_with_patterns(text: str, language: str, raw_text: str) -> ParsedReference | None:
    patterns = KOREAN_PATTERNS if language == "kr" else ENGLISH_PATTERNS

    for pattern, has_verse in patterns:
        match = pattern.search(text)
        if not match:
            continue

        chapter = int(match.group(2))
        verse = int(match.group(3)) if has_verse else None
        book_match = find_book(match.group(1))

        # Chapter out of range for the book: try the next pattern
        if book_match.book is not None and chapter > book_match.book.chapter_count:
            continue

        return _reference(book_match, chapter, verse, language, raw_text)

    return None


def _parse_with_number_words(text: str, language: str, raw_text: str) -> ParsedReference | None:
    converted = convert_number_words(text, language)

    numbers = [int(number) for number in re.findall(r"\d+", converted)]
    book_text = " ".join(re.sub(r"\d+", " ", converted).split())
    if not book_text or not numbers:
        return None

    book_match = find_book(book_text)
    chapter = numbers[0]
    verse = numbers[1] if len(numbers) > 1 else None

    if book_match.book is not None and chapter > book_match.book.chapter_count:
        return None

    return _reference(book_match, chapter, verse, language, raw_text)


def _parse_book_only(text: str, language: str, raw_text: str) -> ParsedReference | None:
    book_match = find_book(text)
    if book_match.book is None or book_match.confidence == LOW:
        return None

    return _reference(book_match, None, None, language, raw_text)


def parse_reference(text: str) -> ParsedReference:
    """
    Parse a Bible reference from free text.

    Understands Korean ("요한복음 3장 16절", "시편 23편", "삼상 3:4"), English
    ("John 3:16", "john chapter 3 verse 16") and spelled-out numbers
    ("요한복음 삼장 십육절", "john three sixteen"). A bare book name yields a
    reference with no chapter.

    Args:
        text: Typed query or speech transcript

    Returns:
        ParsedReference; when nothing could be recognized its book is None
        and its confidence is "low"
    """
    language = detect_language(text)
    normalized = normalize_text(text, language)

    for strategy in (_parse_with_patterns, _parse_with_number_words, _parse_book_only):
        result = strategy(normalized, language, text)
        if result is not None:
            return result

    return ParsedReference(
        book=None,
        chapter=None,
        verse=None,
        language=language,
        raw_text=text,
        confidence=LOW,
    )
