"""Recursive-descent parser and the MiniHTML entry point."""

import logging

from .errors import (
    NestingDepthError,
    StrayEndTagError,
    TagMismatchError,
    UnclosedTagError,
    UnexpectedEOFError,
    UnexpectedTextError,
    UnexpectedTokenError,
)
from .node import CommentTag, DoctypeTag, Identifier, Parameter, Parameters, SoloTag, String, Tag, Text
from .serialize import to_html, to_test_format
from .tokenizer import Tokenizer, TokenizerOpts
from .tokens import SYMBOL_KINDS, TokenKind

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 256

# Symbols that read as ordinary characters when they appear in content
_LITERAL_SYMBOLS = SYMBOL_KINDS - {TokenKind.TAG_BEGIN}
_TEXT_RUN_KINDS = _LITERAL_SYMBOLS | {TokenKind.TEXT}


class ParserOpts:
    __slots__ = ("collapse_whitespace", "debug", "max_depth")

    def __init__(self, max_depth=DEFAULT_MAX_DEPTH, collapse_whitespace=False, debug=False):
        if max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        self.max_depth = max_depth
        self.collapse_whitespace = bool(collapse_whitespace)
        self.debug = bool(debug)


class Parser:
    """Builds a forest of nodes from a token list in a single forward pass.

    The grammar is LL(1) over token kinds. There is no error recovery: the
    first failure raises and no partial forest is returned.
    """

    __slots__ = ("depth", "opts", "pos", "tokens")

    def __init__(self, opts=None):
        self.opts = opts or ParserOpts()
        self.tokens = []
        self.pos = 0
        self.depth = 0

    def parse(self, tokens):
        tokens = list(tokens)
        if not tokens or tokens[-1].kind != TokenKind.EOF:
            raise ValueError("token sequence must end with an EOF token")
        self.tokens = tokens
        self.pos = 0
        self.depth = 0
        return self._parse_nodes(None)

    def debug(self, rule, message):
        # Only format when debugging is on
        if self.opts.debug:
            logger.debug("%s%s: %s", "  " * self.depth, rule, message)

    # ---------------------
    # Cursor helpers
    # ---------------------

    def _current(self):
        return self.tokens[self.pos]

    def _peek(self, offset):
        # Lookahead past the end keeps returning the EOF token
        index = self.pos + offset
        if index < len(self.tokens):
            return self.tokens[index]
        return self.tokens[-1]

    def _advance(self):
        token = self.tokens[self.pos]
        if token.kind == TokenKind.EOF:
            raise UnexpectedEOFError(None, token)
        self.pos += 1
        return token

    def _consume_kind(self, kind):
        if self.tokens[self.pos].kind == kind:
            return self._advance()
        return None

    def _expect_kind(self, kind):
        token = self.tokens[self.pos]
        if token.kind == kind:
            return self._advance()
        if token.kind == TokenKind.EOF:
            raise UnexpectedEOFError(kind, token)
        raise UnexpectedTokenError(kind, token)

    def _expect_text(self, literal, case_sensitive=False):
        token = self.tokens[self.pos]
        if token.kind == TokenKind.EOF:
            raise UnexpectedEOFError(TokenKind.TEXT, token)
        if token.kind != TokenKind.TEXT:
            raise UnexpectedTextError(literal, token)
        text = token.text if case_sensitive else token.text.lower()
        if text != literal:
            raise UnexpectedTextError(literal, token)
        return self._advance()

    def _skip_whitespace(self):
        while self.tokens[self.pos].kind == TokenKind.WHITESPACE:
            self.pos += 1

    # ---------------------
    # Grammar rules
    # ---------------------

    def _parse_nodes(self, open_name):
        """Parse siblings until EOF (top level) or the close tag of ``open_name``."""
        nodes = []
        while True:
            self._skip_whitespace()
            token = self._current()
            if token.kind == TokenKind.EOF:
                if open_name is not None:
                    raise UnclosedTagError(open_name, position=token.position)
                return nodes
            if token.kind == TokenKind.TAG_BEGIN:
                if self._peek(1).kind == TokenKind.SLASH:
                    if open_name is None:
                        name_token = self._peek(2)
                        name = name_token.text.lower() if name_token.kind == TokenKind.TEXT else ""
                        raise StrayEndTagError(name, position=token.position)
                    return nodes
                self._advance()
                nodes.append(self._parse_tag())
            else:
                nodes.append(self._parse_text())

    def _parse_name(self):
        """Read a tag or attribute name; hyphenated names like ``data-id`` are joined."""
        first = self._expect_kind(TokenKind.TEXT)
        parts = [first.text]
        while self._current().kind == TokenKind.HYPHEN:
            offset = 1
            while self._peek(offset).kind == TokenKind.HYPHEN:
                offset += 1
            if self._peek(offset).kind != TokenKind.TEXT:
                break
            for _ in range(offset + 1):
                parts.append(self._advance().text)
        return "".join(parts).lower(), first

    def _parse_tag(self):
        if self._consume_kind(TokenKind.EXCL):
            return self._parse_decl()

        name, name_token = self._parse_name()
        self.debug("tag", f"<{name}> at {name_token.position!r}")
        self._skip_whitespace()
        params = self._parse_params()
        self._skip_whitespace()

        if self._consume_kind(TokenKind.SLASH):
            self._expect_kind(TokenKind.TAG_END)
            return SoloTag(name, params)

        self._expect_kind(TokenKind.TAG_END)

        if self.depth >= self.opts.max_depth:
            raise NestingDepthError(self.opts.max_depth, position=name_token.position)
        self.depth += 1
        children = self._parse_nodes(name)
        self.depth -= 1

        self._expect_kind(TokenKind.TAG_BEGIN)
        self._expect_kind(TokenKind.SLASH)
        close_name, close_token = self._parse_name()
        if close_name != name:
            raise TagMismatchError(name, close_name, position=close_token.position)
        self._skip_whitespace()
        self._expect_kind(TokenKind.TAG_END)
        self.debug("tag", f"</{name}> with {len(children)} children")
        return Tag(name, params, children)

    def _parse_params(self):
        items = []
        while True:
            self._skip_whitespace()
            kind = self._current().kind
            if kind in (TokenKind.TAG_END, TokenKind.SLASH):
                break
            name, _ = self._parse_name()
            self._expect_kind(TokenKind.ASSIGN)
            value = self._expect_kind(TokenKind.STRING)
            items.append(Parameter(Identifier(name), String(value.text)))
        if not items:
            return None
        self.debug("params", ", ".join(item.name.name for item in items))
        return Parameters(items)

    def _parse_decl(self):
        if self._consume_kind(TokenKind.HYPHEN):
            self._expect_kind(TokenKind.HYPHEN)
            return self._parse_comment()

        self._expect_text("doctype")
        self._expect_kind(TokenKind.WHITESPACE)
        doctype = self._expect_kind(TokenKind.TEXT)
        self._skip_whitespace()
        self._expect_kind(TokenKind.TAG_END)
        self.debug("doctype", doctype.text)
        return DoctypeTag(doctype.text)

    def _parse_comment(self):
        parts = []
        collapse = self.opts.collapse_whitespace
        while True:
            token = self._current()
            if token.kind == TokenKind.EOF:
                raise UnexpectedEOFError("-->", token)
            if (
                token.kind == TokenKind.HYPHEN
                and self._peek(1).kind == TokenKind.HYPHEN
                and self._peek(2).kind == TokenKind.TAG_END
            ):
                self.pos += 3
                break
            if token.kind == TokenKind.WHITESPACE and collapse:
                parts.append(" ")
            else:
                parts.append(token.source_text)
            self.pos += 1
        text = "".join(parts)
        self.debug("comment", repr(text))
        return CommentTag(text)

    def _parse_text(self):
        parts = []
        collapse = self.opts.collapse_whitespace
        while True:
            token = self._current()
            if token.kind in _TEXT_RUN_KINDS:
                parts.append(token.text)
                self.pos += 1
            elif token.kind == TokenKind.WHITESPACE and parts and self._peek(1).kind in _TEXT_RUN_KINDS:
                parts.append(" " if collapse else token.text)
                self.pos += 1
            else:
                break
        if not parts:
            raise UnexpectedTokenError(TokenKind.TEXT, self._current())
        return Text("".join(parts))


def parse(tokens, opts=None):
    """Parse a token list into a list of top-level nodes."""
    return Parser(opts).parse(tokens)


class MiniHTML:
    """Tokenize and parse ``html`` in one step.

    ``debug``, ``max_depth`` and ``collapse_whitespace`` build the ParserOpts
    used for this document. Pass ``parser_opts`` instead to supply a prebuilt
    one; combining it with any of those keywords raises ValueError.
    """

    __slots__ = ("debug", "nodes", "parser", "tokenizer", "tokens")

    def __init__(
        self,
        html,
        *,
        debug=None,
        max_depth=None,
        collapse_whitespace=None,
        tokenizer_opts=None,
        parser_opts=None,
    ):
        if parser_opts is None:
            parser_opts = ParserOpts(
                max_depth=DEFAULT_MAX_DEPTH if max_depth is None else max_depth,
                collapse_whitespace=bool(collapse_whitespace),
                debug=bool(debug),
            )
        elif debug is not None or max_depth is not None or collapse_whitespace is not None:
            raise ValueError("pass parser_opts or debug/max_depth/collapse_whitespace, not both")
        self.debug = parser_opts.debug
        self.tokenizer = Tokenizer(tokenizer_opts or TokenizerOpts())
        self.parser = Parser(parser_opts)

        self.tokens = self.tokenizer.run(html or "")
        if self.debug:
            logger.debug("tokenized %d tokens", len(self.tokens))
        self.nodes = self.parser.parse(self.tokens)

    def to_html(self):
        return to_html(self.nodes)

    def to_test_format(self):
        return to_test_format(self.nodes)
