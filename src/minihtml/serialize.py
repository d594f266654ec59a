"""Markup serialization utilities for minihtml syntax trees."""

from .node import CommentTag, DoctypeTag, SoloTag, Tag, Text


def _choose_attr_quote(value):
    if '"' in value and "'" not in value:
        return "'"
    return '"'


def _serialize_params(node):
    if node.params is None:
        return ""
    parts = []
    for param in node.params:
        value = param.value.value
        quote = _choose_attr_quote(value)
        parts.append(f"{param.name.name}={quote}{value}{quote}")
    return " " + " ".join(parts)


def _node_to_html(node, parts):
    if isinstance(node, Text):
        parts.append(node.text)
    elif isinstance(node, Tag):
        parts.append(f"<{node.name}{_serialize_params(node)}>")
        for child in node.children:
            _node_to_html(child, parts)
        parts.append(f"</{node.name}>")
    elif isinstance(node, SoloTag):
        parts.append(f"<{node.name}{_serialize_params(node)}/>")
    elif isinstance(node, CommentTag):
        parts.append(f"<!--{node.text}-->")
    elif isinstance(node, DoctypeTag):
        parts.append(f"<!DOCTYPE {node.doctype}>")
    else:
        raise TypeError(f"Cannot serialize {type(node).__name__} as a top-level node")


def to_html(nodes):
    """Serialize a forest back to markup that parses to an equivalent forest."""
    parts = []
    for node in nodes:
        _node_to_html(node, parts)
    return "".join(parts)


def _node_to_test_format(node, indent, lines):
    prefix = "| " + " " * indent
    if isinstance(node, Text):
        lines.append(f'{prefix}"{node.text}"')
    elif isinstance(node, CommentTag):
        lines.append(f"{prefix}<!-- {node.text} -->")
    elif isinstance(node, DoctypeTag):
        lines.append(f"{prefix}<!DOCTYPE {node.doctype}>")
    elif isinstance(node, (Tag, SoloTag)):
        closing = "/" if isinstance(node, SoloTag) else ""
        lines.append(f"{prefix}<{node.name}{closing}>")
        if node.params is not None:
            for param in node.params:
                lines.append(f'{prefix}  {param.name.name}="{param.value.value}"')
        for child in getattr(node, "children", ()):
            _node_to_test_format(child, indent + 2, lines)
    else:
        raise TypeError(f"Cannot format {type(node).__name__} as a tree node")


def to_test_format(nodes):
    """Render a forest in the ``| ``-prefixed html5lib tree-dump style."""
    lines = []
    for node in nodes:
        _node_to_test_format(node, 0, lines)
    return "\n".join(lines)
