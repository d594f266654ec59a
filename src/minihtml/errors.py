"""Parse error hierarchy and human-readable messages.

Every failure raised by the tokenizer or the parser is a ParseError subclass
carrying a kebab-case ``code``, the source ``position`` where it was detected
(when known) and a ``message`` built by generate_error_message().
"""

from .tokens import TokenKind


def _describe_kind(kind):
    if kind is None:
        return "token"
    if isinstance(kind, TokenKind):
        return kind.name.lower().replace("_", "-")
    return str(kind)


def _describe_token(token):
    if token is None:
        return "nothing"
    if token.kind == TokenKind.EOF:
        return "end of input"
    return f"{_describe_kind(token.kind)} {token.source_text!r}"


def generate_error_message(code, **context):
    """Generate a human-readable message for an error code.

    Args:
        code: The error code string (kebab-case format)
        **context: Values interpolated into the message (tag names, tokens, ...)

    Returns:
        Human-readable error message string
    """
    open_name = context.get("open")
    close_name = context.get("close")
    name = context.get("name")
    expected = context.get("expected")
    found = context.get("found")

    messages = {
        # Tokenizer
        "unterminated-string": f"String literal opened with {context.get('quote')} is never closed",
        "unexpected-eof": f"Unexpected end of input while expecting {_describe_kind(expected)}",
        # Parser
        "tag-mismatch": f"Open tag <{open_name}> closed by </{close_name}>",
        "unexpected-token": f"Expected {_describe_kind(expected)} but found {_describe_token(found)}",
        "unexpected-text": f"Expected {expected!r} but found {_describe_token(found)}",
        "unclosed-tag": f"Expected </{name}> closing tag but reached end of input",
        "stray-end-tag": f"Closing tag </{name}> has no matching open tag",
        "nesting-too-deep": f"Elements nested deeper than the limit of {context.get('limit')}",
    }

    # Return message or fall back to the code itself if not found
    return messages.get(code, code)


class ParseError(Exception):
    """Base class for tokenizer and parser failures."""

    code = "parse-error"

    def __init__(self, position=None, message=None, **context):
        self.position = position
        self.message = message or generate_error_message(self.code, **context)
        super().__init__(self.message)

    @property
    def line(self):
        return self.position.line_number if self.position is not None else None

    @property
    def column(self):
        return self.position.column if self.position is not None else None

    def __str__(self):
        if self.position is not None:
            if self.message != self.code:
                return f"({self.line},{self.column}): {self.code} - {self.message}"
            return f"({self.line},{self.column}): {self.code}"
        if self.message != self.code:
            return f"{self.code} - {self.message}"
        return self.code

    def __repr__(self):
        if self.position is not None:
            return f"{type(self).__name__}({self.code!r}, line={self.line}, column={self.column})"
        return f"{type(self).__name__}({self.code!r})"


class TagMismatchError(ParseError):
    code = "tag-mismatch"

    def __init__(self, open, close, position=None):
        self.open = open
        self.close = close
        super().__init__(position, open=open, close=close)


class UnexpectedTokenError(ParseError):
    code = "unexpected-token"

    def __init__(self, expected, found, position=None):
        self.expected = expected
        self.found = found
        if position is None and found is not None:
            position = found.position
        super().__init__(position, expected=expected, found=found)


class UnexpectedEOFError(UnexpectedTokenError):
    """Input ended where more was required."""

    code = "unexpected-eof"


class UnexpectedTextError(ParseError):
    code = "unexpected-text"

    def __init__(self, expected, found, position=None):
        self.expected = expected
        self.found = found
        if position is None and found is not None:
            position = found.position
        super().__init__(position, expected=expected, found=found)


class UnterminatedStringError(ParseError):
    code = "unterminated-string"

    def __init__(self, quote, position=None):
        self.quote = quote
        super().__init__(position, quote=quote)


class UnclosedTagError(ParseError):
    code = "unclosed-tag"

    def __init__(self, name, position=None):
        self.name = name
        super().__init__(position, name=name)


class StrayEndTagError(ParseError):
    code = "stray-end-tag"

    def __init__(self, name, position=None):
        self.name = name
        super().__init__(position, name=name)


class NestingDepthError(ParseError):
    code = "nesting-too-deep"

    def __init__(self, limit, position=None):
        self.limit = limit
        super().__init__(position, limit=limit)
