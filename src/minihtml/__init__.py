from .errors import (
    NestingDepthError,
    ParseError,
    StrayEndTagError,
    TagMismatchError,
    UnclosedTagError,
    UnexpectedEOFError,
    UnexpectedTextError,
    UnexpectedTokenError,
    UnterminatedStringError,
)
from .node import CommentTag, DoctypeTag, Identifier, Node, Parameter, Parameters, SoloTag, String, Tag, Text
from .parser import DEFAULT_MAX_DEPTH, MiniHTML, Parser, ParserOpts, parse
from .position import Position
from .serialize import to_html, to_test_format
from .tokenizer import Tokenizer, TokenizerOpts, tokenize
from .tokens import Token, TokenKind

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "CommentTag",
    "DoctypeTag",
    "Identifier",
    "MiniHTML",
    "NestingDepthError",
    "Node",
    "Parameter",
    "Parameters",
    "ParseError",
    "Parser",
    "ParserOpts",
    "Position",
    "SoloTag",
    "StrayEndTagError",
    "String",
    "Tag",
    "TagMismatchError",
    "Text",
    "Token",
    "TokenKind",
    "Tokenizer",
    "TokenizerOpts",
    "UnclosedTagError",
    "UnexpectedEOFError",
    "UnexpectedTextError",
    "UnexpectedTokenError",
    "UnterminatedStringError",
    "parse",
    "to_html",
    "to_test_format",
    "tokenize",
]
