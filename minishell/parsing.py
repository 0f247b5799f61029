"""Splitting of command lines into words."""

from __future__ import annotations

WORD_DELIMITERS = " \t\n"


def split_words(text: str, delimiters: str) -> list[str]:
    """Split ``text`` on any character of ``delimiters``, dropping empty words."""
    words: list[str] = []
    current: list[str] = []
    for char in text:
        if char in delimiters:
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        words.append("".join(current))
    return words


def parse_command(line: str) -> list[str]:
    """Turn one input line into the list of its words."""
    if line.endswith("\n"):
        line = line[:-1]
    return split_words(line, WORD_DELIMITERS)