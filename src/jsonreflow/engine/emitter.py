"""Output accumulation with row/column tracking and transactional snapshots.

All text produced by the formatter goes through ``Emitter.write``. Besides appending
to the output, it tracks the current output row and column, which is what the
single-line layout attempts are measured against.

A ``Snapshot`` records the complete formatter state (source offset, output length,
row, column, indentation depth) at the start of a single-line attempt. While a
snapshot is active, every write checks whether the output has moved to another row
or past the width limit. If so the emitter is marked as overflowed: further writes
become no-ops, the formatting loops bail out, and the code that took the snapshot
restores it and renders the composite multi-line instead.
"""

import contextlib
from dataclasses import dataclass
from typing import Iterator, List, Optional

from jsonreflow.config import FormatConfig

NEWLINE = "\n"
SEPARATOR = " "


@dataclass(frozen=True)
class Snapshot:
    """Formatter state captured at the start of a speculative attempt.

    Attributes:
        offset: Source offset of the cursor.
        length: Number of characters written so far.
        row: Output row.
        column: Output column.
        indent_depth: Indentation depth.
        previous: Snapshot that was active when this one was taken, if any.
    """

    offset: int
    length: int
    row: int
    column: int
    indent_depth: int
    previous: Optional["Snapshot"] = None


class Emitter:
    """Accumulates formatted output.

    Attributes:
        config (FormatConfig): Layout policy, consulted for spacing, indentation,
            width and trailing commas.
        row (int): Number of line breaks written so far.
        column (int): Number of characters written on the current row.
        indent_depth (int): Current indentation level.
        discard (bool): When set, writes are suppressed entirely.
        snapshot (Optional[Snapshot]): The innermost active snapshot.
        overflowed (bool): Whether the innermost attempt has exceeded its line.

    Example:
        >>> emitter = Emitter(FormatConfig())
        >>> emitter.write_text("[1,")
        >>> emitter.write_separator_if_spacing()
        >>> emitter.write("2")
        >>> emitter.getvalue(), emitter.row, emitter.column
        ('[1, 2', 0, 5)
    """

    def __init__(self, config: FormatConfig) -> None:
        self.config = config
        self._chars: List[str] = []
        self.row = 0
        self.column = 0
        self.indent_depth = 0
        self.discard = False
        self.snapshot: Optional[Snapshot] = None
        self.overflowed = False

    def __len__(self) -> int:
        return len(self._chars)

    def getvalue(self) -> str:
        return "".join(self._chars)

    # ALL writes go through this method.
    def write(self, char: str) -> None:
        """Write a single character.

        Args:
            char: The character to write.
        """
        if self.discard or self.overflowed:
            return

        if char == "\n" or char == "\r":
            self.row += 1
            self.column = 0
        else:
            self.column += 1

        self._chars.append(char)

        if self.snapshot is not None and self._exceeds_line(self.snapshot):
            self.overflowed = True

    def write_text(self, text: str) -> None:
        for char in text:
            self.write(char)

    def write_separator_if_spacing(self) -> None:
        if self.config.spacing:
            self.write(SEPARATOR)

    def write_newline_if_spacing(self) -> None:
        """Write a newline unless spacing is off or the output already ends with a line break."""
        if self.config.spacing and not self.ends_with_newline():
            self.write(NEWLINE)

    def write_newline(self) -> None:
        self.write(NEWLINE)

    def write_indent(self) -> None:
        self.write_text(self.config.indent * self.indent_depth)

    def write_newline_indent_if_spacing(self) -> None:
        if self.config.spacing:
            self.write_newline_if_spacing()
            self.write_indent()

    def write_trailing_comma_if_configured(self) -> None:
        if self.config.trailing_comma:
            self.write(",")

    def ends_with_newline(self) -> bool:
        return bool(self._chars) and self._chars[-1] in ("\n", "\r")

    @contextlib.contextmanager
    def discarding(self) -> Iterator[None]:
        """Suppress all writes for the duration of the block."""
        previous = self.discard
        self.discard = True
        try:
            yield
        finally:
            self.discard = previous

    def push_snapshot(self, offset: int) -> Snapshot:
        """Capture the current state and make it the active snapshot.

        Args:
            offset: Current source offset of the cursor.

        Returns:
            The new snapshot, linked to the previously active one.
        """
        self.snapshot = Snapshot(
            offset=offset,
            length=len(self._chars),
            row=self.row,
            column=self.column,
            indent_depth=self.indent_depth,
            previous=self.snapshot,
        )
        return self.snapshot

    def pop_snapshot(self, snapshot: Snapshot) -> bool:
        """Deactivate ``snapshot``, making its predecessor active again.

        Args:
            snapshot: The snapshot returned by the matching ``push_snapshot``.

        Returns:
            True if the output overflowed the snapshot's line while it was active.
        """
        overflowed = self.overflowed
        self.snapshot = snapshot.previous
        self.overflowed = False
        return overflowed

    def rollback(self, snapshot: Snapshot) -> int:
        """Discard everything written since ``snapshot`` was taken.

        Args:
            snapshot: The snapshot to restore.

        Returns:
            The source offset the cursor must be reset to.
        """
        del self._chars[snapshot.length :]  # noqa: E203
        self.row = snapshot.row
        self.column = snapshot.column
        self.indent_depth = snapshot.indent_depth
        return snapshot.offset

    def _exceeds_line(self, snapshot: Snapshot) -> bool:
        return self.row > snapshot.row or (self.config.width > 0 and self.column > self.config.width)
