"""
Column and sheet title generation.

auto_title("publicationDate") -> "Publication Date"
auto_title("publication_date") -> "Publication Date"
auto_title("address2Line", "_") -> "Address_2_Line"
compose_path("Author", " ", "Name") -> "Author Name"
"""
import re
from typing import List

_SEPARATORS = re.compile(r'[_\s]+')


def _char_type(ch: str) -> str:
    if ch.isupper():
        return 'upper'
    if ch.islower():
        return 'lower'
    if ch.isdigit():
        return 'digit'
    if ch.isalpha():
        return 'letter'
    return 'other'


def split_camel_case(identifier: str) -> List[str]:
    """
    Split an identifier into words at character-type transitions.

    A run of capitals followed by a lowercase letter gives up its last capital
    to the following word ("HTMLParser" -> ["HTML", "Parser"]). Underscores
    and whitespace separate words and are dropped.

    Args:
        identifier: Field name in camelCase, PascalCase or snake_case

    Returns:
        List of words, never containing empty strings
    """
    words = []
    for chunk in _SEPARATORS.split(identifier):
        if not chunk:
            continue

        start = 0
        current = _char_type(chunk[0])
        for pos in range(1, len(chunk)):
            kind = _char_type(chunk[pos])
            if kind == current:
                continue
            if kind == 'lower' and current == 'upper':
                new_start = pos - 1
                if new_start != start:
                    words.append(chunk[start:new_start])
                    start = new_start
            else:
                words.append(chunk[start:pos])
                start = pos
            current = kind
        words.append(chunk[start:])

    return words


def auto_title(identifier: str, delimiter: str = ' ') -> str:
    """
    Turn a field identifier into a human-readable title.

    Each underscore-separated part gets its first character capitalized, so
    snake_case and camelCase identifiers give the same title.
    """
    parts = [part[:1].upper() + part[1:] for part in _SEPARATORS.split(identifier) if part]
    return delimiter.join(split_camel_case('_'.join(parts)))


def compose_path(existing: str, delimiter: str, segment: str) -> str:
    """Append segment to a title path (no leading delimiter on an empty path)"""
    if not existing:
        return segment
    return f"{existing}{delimiter}{segment}"
