class Position:
    """Location of a character in the source text.

    line_number is 1-based, column is 0-based and resets after every newline,
    absolute_offset counts code points from the start of the input.
    """

    __slots__ = ("absolute_offset", "column", "line_number")

    def __init__(self, line_number=1, column=0, absolute_offset=0):
        object.__setattr__(self, "line_number", line_number)
        object.__setattr__(self, "column", column)
        object.__setattr__(self, "absolute_offset", absolute_offset)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def advance(self, char):
        """Return the position just past ``char``."""
        if char == "\n":
            return Position(self.line_number + 1, 0, self.absolute_offset + 1)
        return Position(self.line_number, self.column + 1, self.absolute_offset + 1)

    def __eq__(self, other):
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.line_number == other.line_number
            and self.column == other.column
            and self.absolute_offset == other.absolute_offset
        )

    def __hash__(self):
        return hash((self.line_number, self.column, self.absolute_offset))

    def __repr__(self):
        return f"Position(line={self.line_number}, column={self.column}, offset={self.absolute_offset})"
