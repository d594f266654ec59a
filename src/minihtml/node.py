class Node:
    """Base class for syntax tree nodes.

    Nodes are immutable once built: fields are assigned in __init__ and any
    later assignment raises AttributeError. Equality is structural and ignores
    identity, so two parses of equivalent markup compare equal.

    Comparison, hashing and repr walk the tree with an explicit stack, so any
    tree the parser accepts can be compared or printed regardless of depth.
    """

    __slots__ = ()

    kind = None

    def _init(self, **fields):
        for name, value in fields.items():
            object.__setattr__(self, name, value)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} nodes are immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} nodes are immutable")

    def _values(self):
        return tuple(getattr(self, name) for name in self.__slots__)

    def _flatten(self):
        # Pre-order walk; node types and tuple lengths fix the shape
        out = []
        stack = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, Node):
                out.append(type(item))
                stack.extend(reversed(item._values()))
            elif isinstance(item, tuple):
                out.append((tuple, len(item)))
                stack.extend(reversed(item))
            else:
                out.append(item)
        return out

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._flatten() == other._flatten()

    def __hash__(self):
        return hash(tuple(self._flatten()))

    def __repr__(self):
        parts = []
        # (is_fragment, value) pairs; fragments are emitted as-is
        stack = [(False, self)]
        while stack:
            is_fragment, item = stack.pop()
            if is_fragment:
                parts.append(item)
                continue
            if isinstance(item, Node):
                pending = [(True, f"{type(item).__name__}(")]
                for i, name in enumerate(item.__slots__):
                    pending.append((True, f"{', ' if i else ''}{name}="))
                    pending.append((False, getattr(item, name)))
                pending.append((True, ")"))
            elif isinstance(item, tuple):
                pending = [(True, "(")]
                for i, value in enumerate(item):
                    if i:
                        pending.append((True, ", "))
                    pending.append((False, value))
                pending.append((True, ",)" if len(item) == 1 else ")"))
            else:
                parts.append(repr(item))
                continue
            stack.extend(reversed(pending))
        return "".join(parts)

    def to_html(self):
        from .serialize import to_html

        return to_html([self])


class Identifier(Node):
    __slots__ = ("name",)

    kind = "identifier"

    def __init__(self, name):
        self._init(name=name)


class String(Node):
    __slots__ = ("value",)

    kind = "string"

    def __init__(self, value):
        self._init(value=value)


class Parameter(Node):
    """One ``name="value"`` attribute pair."""

    __slots__ = ("name", "value")

    kind = "parameter"

    def __init__(self, name, value):
        if not isinstance(name, Identifier):
            name = Identifier(name)
        if not isinstance(value, String):
            value = String(value)
        self._init(name=name, value=value)


class Parameters(Node):
    __slots__ = ("items",)

    kind = "parameters"

    def __init__(self, items):
        self._init(items=tuple(items))

    def __iter__(self):
        return iter(self.items)

    def __len__(self):
        return len(self.items)

    def as_dict(self):
        # Later duplicates win, matching attribute lookup on the element
        return {item.name.name: item.value.value for item in self.items}


class _Element(Node):
    __slots__ = ()

    @property
    def attrs(self):
        if self.params is None:
            return {}
        return self.params.as_dict()


def _params_or_none(params):
    # A tag with no attributes carries no Parameters node at all
    if params is None:
        return None
    if not isinstance(params, Parameters):
        params = Parameters(params)
    return params if params.items else None


class Tag(_Element):
    """Element with an open tag, a matching close tag and ordered children."""

    __slots__ = ("name", "params", "children")

    kind = "tag"

    def __init__(self, name, params=None, children=()):
        self._init(name=name.lower(), params=_params_or_none(params), children=tuple(children))


class SoloTag(_Element):
    """Self-closing element such as ``<br/>``; never has children."""

    __slots__ = ("name", "params")

    kind = "solo_tag"

    def __init__(self, name, params=None):
        self._init(name=name.lower(), params=_params_or_none(params))


class CommentTag(Node):
    __slots__ = ("text",)

    kind = "comment"

    def __init__(self, text):
        self._init(text=text)


class DoctypeTag(Node):
    __slots__ = ("doctype",)

    kind = "doctype"

    def __init__(self, doctype):
        self._init(doctype=doctype.lower())


class Text(Node):
    __slots__ = ("text",)

    kind = "text"

    def __init__(self, text):
        self._init(text=text)
