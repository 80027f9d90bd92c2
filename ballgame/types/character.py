from __future__ import annotations


# Named character literals: #\space, #\newline, ...
NAMED_CHARS: dict[str, str] = {
    "space": " ",
    "newline": "\n",
    "return": "\r",
    "linefeed": "\f",
    "tab": "\t",
    "vtab": "\v",
    "backspace": "\b",
}

CHAR_NAMES: dict[str, str] = {char: name for name, char in NAMED_CHARS.items()}


class Character:
    """A single character value, kept apart from one-character strings."""

    __slots__ = ("char",)

    def __init__(self, char: str):
        if len(char) != 1:
            raise ValueError(f"Character expects exactly one char, got {char!r}")
        self.char = char

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Character) and self.char == other.char

    def __hash__(self) -> int:
        return hash(("char", self.char))

    def __repr__(self):
        return f"Character({self.char!r})"

    def __str__(self):
        return "#\\" + CHAR_NAMES.get(self.char, self.char)
