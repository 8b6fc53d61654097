"""Component name derivation."""

from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[\W_]+")


def pascal_case(key: str) -> str:
    """Convert a JSON key into a PascalCase component name (`user_id` -> `UserId`).

    Words break on separators, lower-to-upper transitions (`createdAt`),
    the end of an acronym (`HTTPServer`) and letter/digit transitions.
    Only the first character of each word is upper-cased, so letters such
    as `ß` keep their form.
    """
    words: list[str] = []
    for chunk in _SEPARATORS.split(key):
        words.extend(_split_words(chunk))
    return "".join(word[0].upper() + word[1:].lower() for word in words)


def _split_words(chunk: str) -> list[str]:
    words: list[str] = []
    start = 0
    for index in range(1, len(chunk)):
        if _is_word_boundary(chunk, index):
            words.append(chunk[start:index])
            start = index
    if chunk:
        words.append(chunk[start:])
    return words


def _is_word_boundary(chunk: str, index: int) -> bool:
    previous, current = chunk[index - 1], chunk[index]
    if previous.isdigit() != current.isdigit():
        return True
    if previous.islower() and current.isupper():
        return True
    following = chunk[index + 1] if index + 1 < len(chunk) else ""
    return previous.isupper() and current.isupper() and following.islower()
