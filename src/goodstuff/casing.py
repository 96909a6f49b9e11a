"""String case conversion helpers."""

from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[\W_]+")


def _is_lower(char: str) -> bool:
    # caseless letters (e.g. CJK) group with lowercase runs
    return char.isalpha() and not char.isupper()


def _split_chunk(chunk: str) -> list[str]:
    words: list[str] = []
    index = 0
    size = len(chunk)
    while index < size:
        char = chunk[index]
        if char.isupper():
            end = index
            while end < size and chunk[end].isupper():
                end += 1
            if end < size and _is_lower(chunk[end]):
                # acronym runs stop before a capitalized word: "HTTPServer" -> "HTTP", "Server"
                if end - index > 1:
                    words.append(chunk[index : end - 1])
                    index = end - 1
                end = index + 1
                while end < size and _is_lower(chunk[end]):
                    end += 1
        elif _is_lower(char):
            end = index
            while end < size and _is_lower(chunk[end]):
                end += 1
        else:
            end = index
            while end < size and not chunk[end].isalpha():
                end += 1
        words.append(chunk[index:end])
        index = end
    return words


def split_words(text: str) -> list[str]:
    """Split camel, pascal, snake, kebab or spaced text into its words.

    Case boundaries follow ``str.isupper``, so accented and other non-ASCII
    letters stay inside their words.
    """

    words: list[str] = []
    for chunk in _SEPARATORS.split(text):
        words.extend(_split_chunk(chunk))
    return words


def to_snake_case(text: str) -> str:
    return "_".join(word.lower() for word in split_words(text))


def to_kebab_case(text: str) -> str:
    return "-".join(word.lower() for word in split_words(text))


def to_constant_case(text: str) -> str:
    return "_".join(word.upper() for word in split_words(text))


def to_camel_case(text: str) -> str:
    words = split_words(text)
    if not words:
        return ""
    return words[0].lower() + "".join(word.capitalize() for word in words[1:])


def to_pascal_case(text: str) -> str:
    return "".join(word.capitalize() for word in split_words(text))


def to_title_case(text: str) -> str:
    return " ".join(word.capitalize() for word in split_words(text))


__all__ = [
    "split_words",
    "to_camel_case",
    "to_constant_case",
    "to_kebab_case",
    "to_pascal_case",
    "to_snake_case",
    "to_title_case",
]
