"""Korean initial-consonant (choseong) and partial-syllable search."""

# Precomposed Hangul syllable block
HANGUL_BASE = 0xAC00  # 가
HANGUL_END = 0xD7A3  # 힣

# 21 medials x 28 finals per initial consonant
INITIAL_UNIT = 588
# 28 finals per medial (index 0 = no final consonant)
MEDIAL_UNIT = 28

INITIAL_CONSONANTS = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ",
    "ㅅ", "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

_INITIAL_CONSONANT_SET = frozenset(INITIAL_CONSONANTS)

# Tab and the Unicode space separators; line breaks are not trimmed
HORIZONTAL_WHITESPACE = (
    "\t \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005"
    "\u2006\u2007\u2008\u2009\u200a\u202f\u205f\u3000"
)


def trim_query(query: str) -> str:
    """Strip surrounding spaces and tabs from a search query, keeping line breaks."""
    return query.strip(HORIZONTAL_WHITESPACE)


def is_initial_consonant(ch: str) -> bool:
    """Check whether a character is one of the 19 standalone initial consonants."""
    return ch in _INITIAL_CONSONANT_SET


def is_initial_consonant_only(text: str) -> bool:
    """Check whether a non-empty string consists only of initial consonants."""
    return bool(text) and all(is_initial_consonant(ch) for ch in text)


def is_hangul_syllable(ch: str) -> bool:
    """Check whether a single character is a precomposed Hangul syllable."""
    return len(ch) == 1 and HANGUL_BASE <= ord(ch) <= HANGUL_END


def decompose_syllable(ch: str) -> tuple[int, int, int] | None:
    """
    Split a precomposed syllable into its component indices.

    Args:
        ch: A single character

    Returns:
        Tuple of (initial, medial, final) indices, or None if the character is
        not a precomposed Hangul syllable. A final index of 0 means the
        syllable has no final consonant.
    """
    if not is_hangul_syllable(ch):
        return None

    offset = ord(ch) - HANGUL_BASE
    return offset // INITIAL_UNIT, (offset % INITIAL_UNIT) // MEDIAL_UNIT, offset % MEDIAL_UNIT


def get_initial_consonant(ch: str) -> str | None:
    """Return the initial consonant of a syllable (or the consonant itself)."""
    if is_initial_consonant(ch):
        return ch

    parts = decompose_syllable(ch)
    if parts is None:
        return None
    return INITIAL_CONSONANTS[parts[0]]


def extract_initial_consonants(text: str) -> str:
    """
    Extract the initial-consonant skeleton of a string.

    Syllables are replaced by their initial consonant, standalone initial
    consonants are kept and every other character is dropped.

    >>> extract_initial_consonants("창세기")
    'ㅊㅅㄱ'
    >>> extract_initial_consonants("1 사무엘상")
    'ㅅㅁㅇㅅ'
    """
    result: list[str] = []
    for ch in text:
        initial = get_initial_consonant(ch)
        if initial is not None:
            result.append(initial)
    return "".join(result)


def _syllable_base(ch: str) -> int:
    # Initial + medial bucket, final consonant stripped
    return (ord(ch) - HANGUL_BASE) // MEDIAL_UNIT


def matches_syllable(query_char: str, target_char: str, allow_partial: bool) -> bool:
    """
    Compare a single query character against a single target character.

    Args:
        query_char: Character typed by the user
        target_char: Character from the searched text
        allow_partial: Whether syllables sharing initial and medial match
                       regardless of their final consonants

    Returns:
        True if the characters match under the rules above
    """
    if query_char == target_char:
        return True

    if is_initial_consonant(query_char):
        return get_initial_consonant(target_char) == query_char

    if allow_partial and is_hangul_syllable(query_char) and is_hangul_syllable(target_char):
        return _syllable_base(query_char) == _syllable_base(target_char)

    return False


def _matches_from(query: str, target: str, start: int) -> bool:
    if start + len(query) > len(target):
        return False

    last = len(query) - 1
    for i, query_char in enumerate(query):
        target_char = target[start + i]
        if i == last:
            if not matches_syllable(query_char, target_char, allow_partial=True):
                return False
        elif query_char != target_char:
            return False

    return True


def matches_partial_syllable(query: str, target: str) -> bool:
    """
    Find a run in target that equals query up to a partially typed last syllable.

    For example "차" matches the "창" of "창세기" and "창세" matches "창셋".
    """
    if not query:
        return True

    return any(_matches_from(query, target, start) for start in range(len(target)))


def matches(query: str, target: str) -> bool:
    """
    Check whether a search query matches a target string.

    Three strategies are tried in order:
    1. Plain substring containment
    2. Initial-consonant search when the query is all consonants ("ㅊㅅ")
    3. Partial-syllable search on the last query character ("차" -> "창")

    Args:
        query: Search query; surrounding spaces and tabs are ignored
        target: Text to search in

    Returns:
        True if the query matches. An empty query matches everything.

    >>> matches("ㅊㅅ", "창세기")
    True
    >>> matches("차", "창세기")
    True
    >>> matches("처", "창세기")
    False
    """
    query = trim_query(query)
    if not query:
        return True

    if query in target:
        return True

    if is_initial_consonant_only(query):
        return query in extract_initial_consonants(target)

    return matches_partial_syllable(query, target)
