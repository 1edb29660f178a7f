"""Editing state for single-line text boxes."""

from __future__ import annotations

from dataclasses import dataclass

PATH_MAX_LENGTH = 35


@dataclass
class TextBuffer:
    """A line of text limited to ``max_length`` characters."""

    max_length: int
    text: str = ""

    def __post_init__(self) -> None:
        if self.max_length < 0:
            raise ValueError("max_length must be non-negative")
        self.text = self.text[: self.max_length]

    def insert(self, text: str) -> int:
        """Append as much of ``text`` as fits; return how many characters were added."""
        room = self.max_length - len(self.text)
        added = text[:room]
        self.text += added
        return len(added)

    def backspace(self) -> None:
        """Remove the last character, if any."""
        self.text = self.text[:-1]

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text


def input_char(text: str, c: str, max_length: int = PATH_MAX_LENGTH) -> str:
    """Return ``text`` with ``c`` appended unless it has reached ``max_length``."""
    if len(text) < max_length:
        return text + c
    return text


def remove_last_char(text: str) -> str:
    """Return ``text`` without its last character."""
    return text[:-1]


def apply_case(c: str, shift: bool, capslock: bool) -> str:
    """Upper-case ``c`` when shift is held or caps lock is on."""
    return c.upper() if shift or capslock else c