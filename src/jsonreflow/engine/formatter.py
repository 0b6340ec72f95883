"""Single-pass layout engine for JSON-like text.

The formatter never builds a syntax tree. It scans the source once, copying strings,
atoms and comments to the output and re-emitting all punctuation itself: commas and
colons in the source only serve as separators between values and are otherwise
ignored, so missing or excess punctuation is repaired on the way through.

For every object and array the formatter first tries to render the whole value on a
single line. The attempt runs against a snapshot of the formatter state; if the output
moves to another row or past the width limit, the attempt is rolled back and the
value is rendered multi-line instead. Nested attempts each measure against their own
snapshot, while an outer attempt still observes the line break caused by an inner
value falling back to multi-line, and falls back in turn.
"""

from typing import List

from jsonreflow.config import FormatConfig
from jsonreflow.engine.comments import CommentHandler
from jsonreflow.engine.cursor import Cursor
from jsonreflow.engine.emitter import Emitter
from jsonreflow.exceptions import FormatterInvariantError, NestingDepthError
from jsonreflow.logging_config import get_logger
from jsonreflow.types import CompositeKind, LayoutOutcome

logger = get_logger(__name__)


class Formatter:
    """Formats one source text according to a configuration.

    A formatter is single-use: create one per source text and call ``run`` once.

    Attributes:
        config (FormatConfig): Layout policy.
        cursor (Cursor): Position in the source text.
        emitter (Emitter): Output being produced.
        comments (CommentHandler): Comment recognition and copying.
        root_offsets (List[int]): Output offset at which each top-level value starts.

    Example:
        >>> Formatter(FormatConfig(), '{"one" "two" "three" {"four" "five"}}').run()
        '{"one": "two", "three": {"four": "five"}}\\n'
        >>> Formatter(FormatConfig(width=0), "[1 2]").run()
        '[\\n  1,\\n  2\\n]\\n'
    """

    def __init__(self, config: FormatConfig, source: str) -> None:
        self.config = config
        self.cursor = Cursor(source)
        self.emitter = Emitter(config)
        self.comments = CommentHandler(config, self.cursor, self.emitter)
        self._nesting = 0
        self.root_offsets: List[int] = []

    def run(self) -> str:
        """Format the whole source text.

        Returns:
            The formatted text.

        Raises:
            NestingDepthError: If objects and arrays nest deeper than ``config.max_depth``.
        """
        self._top()
        return self.emitter.getvalue()

    def _top(self) -> None:
        cursor = self.cursor
        emitter = self.emitter

        while cursor.more():
            if self._skipped():
                continue

            if self.comments.is_next_comment():
                self._expect_value()
                if not self.config.strip_comments:
                    emitter.write_newline_if_spacing()
                continue

            start = len(emitter)
            if self._scanned_value():
                self.root_offsets.append(start)
                emitter.write_newline_if_spacing()
                continue

            # Unrecognized content that no value scan consumes
            cursor.skip_char()

    def _value(self) -> None:
        """Dispatch on the next character to the matching value handler."""
        cursor = self.cursor

        for kind in CompositeKind:
            if cursor.is_next(kind.opening):
                self._composite(kind)
                return

        if cursor.is_next('"'):
            self._string()
        elif self.comments.is_next_line_comment():
            self.comments.line_comment()
        elif self.comments.is_next_block_comment():
            self.comments.block_comment()
        else:
            self._atom()

    def _scanned_value(self) -> bool:
        start = self.cursor.offset
        self._value()
        return self.cursor.offset > start

    def _expect_value(self) -> None:
        """Format a value that the caller knows to be present."""
        start = self.cursor.offset
        self._value()
        if __debug__ and self.cursor.offset == start:
            raise FormatterInvariantError("value dispatch made no progress", start)

    def _composite(self, kind: CompositeKind) -> None:
        depth = self._nesting + 1
        if depth > self.config.max_depth:
            raise NestingDepthError(depth, self.config.max_depth)

        self._nesting = depth
        try:
            if not self.config.spacing:
                self._single_line(kind)
            elif (
                not self.config.prefers_single_line
                or self._attempt_single_line(kind) is LayoutOutcome.NEEDS_MULTI_LINE
            ):
                self._multi_line(kind)
        finally:
            self._nesting = depth - 1

    def _attempt_single_line(self, kind: CompositeKind) -> LayoutOutcome:
        """Try to render a composite on one line, rolling back if it does not fit."""
        snapshot = self.emitter.push_snapshot(self.cursor.offset)
        try:
            self._single_line(kind)
        finally:
            overflowed = self.emitter.pop_snapshot(snapshot)

        if not overflowed:
            return LayoutOutcome.SINGLE_LINE

        self.cursor.offset = self.emitter.rollback(snapshot)
        logger.debug("%s at offset %d does not fit on one line", kind.name.lower(), snapshot.offset)
        return LayoutOutcome.NEEDS_MULTI_LINE

    def _single_line(self, kind: CompositeKind) -> None:
        cursor = self.cursor
        emitter = self.emitter

        self._copy_char()
        is_key = kind is CompositeKind.OBJECT

        while cursor.more() and not emitter.overflowed:
            if cursor.is_next(kind.closing):
                self._copy_char()
                return

            if self._skipped():
                continue

            if self.comments.is_next_comment():
                self._expect_value()
                continue

            self._expect_value()

            if is_key:
                emitter.write(":")
                emitter.write_separator_if_spacing()
                is_key = False
                continue

            if self._has_more_before(kind.closing):
                emitter.write(",")
                emitter.write_separator_if_spacing()
            is_key = kind is CompositeKind.OBJECT

    def _multi_line(self, kind: CompositeKind) -> None:
        cursor = self.cursor
        emitter = self.emitter

        emitter.indent_depth += 1
        self._copy_char()
        emitter.write_newline_if_spacing()
        is_key = kind is CompositeKind.OBJECT

        while cursor.more() and not emitter.overflowed:
            if cursor.is_next(kind.closing):
                emitter.indent_depth -= 1
                emitter.write_newline_indent_if_spacing()
                self._copy_char()
                return

            if self._skipped():
                continue

            if self.comments.is_next_comment():
                if not self.config.strip_comments:
                    emitter.write_newline_indent_if_spacing()
                self._expect_value()
                continue

            if is_key:
                emitter.write_newline_indent_if_spacing()
                self._expect_value()
                emitter.write(":")
                emitter.write_separator_if_spacing()
                is_key = False
                continue

            # Object values stay on their key's line
            if kind is CompositeKind.ARRAY:
                emitter.write_newline_indent_if_spacing()
            self._expect_value()

            if self._has_more_before(kind.closing):
                emitter.write(",")
            else:
                emitter.write_trailing_comma_if_configured()
            is_key = kind is CompositeKind.OBJECT

    def _has_more_before(self, closing: str) -> bool:
        """Check whether any non-comment content precedes the closing bracket.

        The probe consumes nothing and writes nothing.
        """
        cursor = self.cursor
        start = cursor.offset

        try:
            with self.emitter.discarding():
                while cursor.more():
                    if cursor.is_next(closing):
                        return False

                    if self._skipped():
                        continue

                    if self.comments.is_next_comment():
                        self.comments.comment()
                        continue

                    return True
                return False
        finally:
            cursor.offset = start

    def _string(self) -> None:
        cursor = self.cursor
        self._copy_char()

        while cursor.more():
            if cursor.is_next('"'):
                self._copy_char()
                return

            if cursor.is_next("\\"):
                self._copy_char()
                if cursor.more():
                    self._copy_char()
                continue

            self._copy_char()

    def _atom(self) -> None:
        cursor = self.cursor
        while cursor.more() and not (
            cursor.is_next_space() or cursor.is_next_terminal_char() or self.comments.is_next_comment()
        ):
            self._copy_char()

    def _skipped(self) -> bool:
        """Skip one whitespace, separator or stray closing bracket character.

        Closing brackets that belong to the current composite are checked by the
        caller before this is reached.
        """
        cursor = self.cursor
        if cursor.is_next_space() or cursor.is_next_punctuation() or cursor.is_next_closing():
            cursor.skip_char()
            return True
        return False

    def _copy_char(self) -> None:
        self.emitter.write(self.cursor.next_char())
