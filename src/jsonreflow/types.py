from enum import Enum
from typing import Union

# Source text accepted by the public entry points
SourceType = Union[str, bytes]


class CompositeKind(Enum):
    """Enumeration of the composite values the formatter lays out.

    Each member carries its opening and closing bracket so that object and
    array formatting can share the same layout machinery.

    Attributes:
        OBJECT: A ``{ ... }`` value whose children alternate key and value.
        ARRAY: A ``[ ... ]`` value whose children are plain elements.
    """

    OBJECT = ("{", "}")
    ARRAY = ("[", "]")

    @property
    def opening(self) -> str:
        return self.value[0]

    @property
    def closing(self) -> str:
        return self.value[1]


class LayoutOutcome(Enum):
    """Result of a speculative single-line rendering attempt.

    Attributes:
        SINGLE_LINE: The composite fit on one line and its output was kept.
        NEEDS_MULTI_LINE: The attempt overflowed and was rolled back.
    """

    SINGLE_LINE = "single_line"
    NEEDS_MULTI_LINE = "needs_multi_line"
