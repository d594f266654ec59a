import enum


class TokenKind(enum.IntEnum):
    EOF = 0
    WHITESPACE = 1
    TAG_BEGIN = 2
    TAG_END = 3
    EXCL = 4
    ASSIGN = 5
    HYPHEN = 6
    SLASH = 7
    AMP = 8
    STRING = 9
    TEXT = 10


RESERVED_SYMBOLS = {
    "<": TokenKind.TAG_BEGIN,
    ">": TokenKind.TAG_END,
    "!": TokenKind.EXCL,
    "=": TokenKind.ASSIGN,
    "-": TokenKind.HYPHEN,
    "/": TokenKind.SLASH,
    "&": TokenKind.AMP,
}

SYMBOL_KINDS = frozenset(RESERVED_SYMBOLS.values())


class Token:
    __slots__ = ("kind", "position", "quote", "text")

    def __init__(self, kind, position, text="", quote=None):
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "position", position)
        object.__setattr__(self, "text", text)
        # Only string literals remember which quote opened them.
        object.__setattr__(self, "quote", quote)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def source_text(self):
        """The token as it appeared in the input."""
        if self.kind == TokenKind.STRING:
            return f"{self.quote}{self.text}{self.quote}"
        return self.text

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (
            self.kind == other.kind
            and self.position == other.position
            and self.text == other.text
            and self.quote == other.quote
        )

    __hash__ = None

    def __repr__(self):
        pos = self.position
        where = f"{pos.line_number}:{pos.column}"
        if self.kind == TokenKind.EOF:
            return f"<EOF @{where}>"
        return f"<{self.kind.name} {self.source_text!r} @{where}>"
