from .errors import UnexpectedEOFError, UnterminatedStringError
from .position import Position
from .tokens import RESERVED_SYMBOLS, Token, TokenKind

_WHITESPACE = frozenset(" \t\n")
_QUOTES = frozenset("'\"")


def _is_word_char(c):
    return c.isalnum() or c == "_"


class TokenizerOpts:
    __slots__ = ("discard_bom",)

    def __init__(self, discard_bom=True):
        self.discard_bom = bool(discard_bom)


class Tokenizer:
    """Turns source text into a flat list of tokens ending with one EOF token.

    Classification, in priority order: whitespace runs, the reserved
    single-character symbols, quoted string literals, then text (a maximal
    run of word characters, or any other single character on its own).
    """

    __slots__ = ("buffer", "length", "opts", "pos", "position", "tokens")

    def __init__(self, opts=None):
        self.opts = opts or TokenizerOpts()
        self.buffer = ""
        self.length = 0
        self.pos = 0
        self.position = Position()
        self.tokens = []

    def reset(self, source):
        if source and source[0] == "\ufeff" and self.opts.discard_bom:
            source = source[1:]

        self.buffer = source or ""
        self.length = len(self.buffer)
        self.pos = 0
        self.position = Position()
        self.tokens = []

    def run(self, source):
        self.reset(source)

        while True:
            c = self.peek(0)
            if c is None:
                break
            if c in _WHITESPACE:
                self._consume_whitespace()
            elif c in RESERVED_SYMBOLS:
                self._consume_symbol()
            elif c in _QUOTES:
                self._consume_string()
            else:
                self._consume_text()

        self.tokens.append(Token(TokenKind.EOF, self.position, ""))
        return self.tokens

    # ---------------------
    # Helper methods
    # ---------------------

    def peek(self, offset=0):
        """Peek ahead at character at current position + offset without consuming"""
        peek_pos = self.pos + offset
        if 0 <= peek_pos < self.length:
            return self.buffer[peek_pos]
        return None

    def starts_with(self, word):
        for offset, want in enumerate(word):
            if self.peek(offset) != want:
                return False
        return True

    def _advance(self):
        c = self.peek(0)
        if c is None:
            raise UnexpectedEOFError(None, None, position=self.position)
        self.pos += 1
        self.position = self.position.advance(c)
        return c

    # ---------------------
    # Token scanners
    # ---------------------

    def _consume_whitespace(self):
        start = self.position
        chars = []
        while self.peek(0) in _WHITESPACE:
            chars.append(self._advance())
        self.tokens.append(Token(TokenKind.WHITESPACE, start, "".join(chars)))

    def _consume_symbol(self):
        start = self.position
        c = self._advance()
        self.tokens.append(Token(RESERVED_SYMBOLS[c], start, c))

    def _consume_string(self):
        start = self.position
        quote = self._advance()
        chars = []
        while True:
            c = self.peek(0)
            if c is None:
                raise UnterminatedStringError(quote, position=start)
            self._advance()
            if c == quote:
                break
            chars.append(c)
        self.tokens.append(Token(TokenKind.STRING, start, "".join(chars), quote=quote))

    def _consume_text(self):
        start = self.position
        c = self._advance()
        if not _is_word_char(c):
            self.tokens.append(Token(TokenKind.TEXT, start, c))
            return
        chars = [c]
        while True:
            c = self.peek(0)
            if c is None or not _is_word_char(c):
                break
            chars.append(self._advance())
        self.tokens.append(Token(TokenKind.TEXT, start, "".join(chars)))


def tokenize(source, opts=None):
    """Tokenize ``source`` into a list of tokens terminated by an EOF token."""
    return Tokenizer(opts).run(source)
