"""Recognition and copying of line and block comments.

Comment syntax is configurable. A line comment runs to the end of its line and is
always followed by a line break in the output, since anything written after it on the
same line would otherwise be commented out. Block comments nest: every further
opening delimiter inside a block comment must be matched by its own closing
delimiter before the comment ends.

When comments are stripped, they are still consumed from the source but nothing at
all is written for them.
"""

from jsonreflow.config import FormatConfig
from jsonreflow.engine.cursor import Cursor
from jsonreflow.engine.emitter import Emitter


class CommentHandler:
    """Recognizes comments at the cursor and copies them to the emitter.

    Attributes:
        config (FormatConfig): Supplies the comment delimiters and the strip policy.
        cursor (Cursor): Shared source cursor.
        emitter (Emitter): Shared output emitter.

    Example:
        >>> config = FormatConfig()
        >>> cursor = Cursor("/* a /* b */ c */ 1")
        >>> emitter = Emitter(config)
        >>> handler = CommentHandler(config, cursor, emitter)
        >>> handler.is_next_comment()
        True
        >>> handler.block_comment()
        >>> emitter.getvalue()
        '/* a /* b */ c */'
    """

    def __init__(self, config: FormatConfig, cursor: Cursor, emitter: Emitter) -> None:
        self.config = config
        self.cursor = cursor
        self.emitter = emitter

    def is_next_line_comment(self) -> bool:
        return self.cursor.is_next_prefix(self.config.comment_line)

    def is_next_block_comment(self) -> bool:
        return self.config.block_comments_enabled and self.cursor.is_next_prefix(self.config.comment_block_start)

    def is_next_comment(self) -> bool:
        return self.is_next_line_comment() or self.is_next_block_comment()

    def comment(self) -> None:
        """Copy the comment at the cursor, whichever kind it is."""
        if self.is_next_line_comment():
            self.line_comment()
        else:
            self.block_comment()

    def line_comment(self) -> None:
        """Copy a line comment through the end of its line.

        The source line break (``\\r\\n``, ``\\n`` or ``\\r``) is consumed and a single
        ``\\n`` is written in its place. A comment that ends the input gets one too.
        """
        if self.config.strip_comments:
            with self.emitter.discarding():
                self._copy_line_comment()
        else:
            self._copy_line_comment()

    def block_comment(self) -> None:
        """Copy a block comment, including any comments nested inside it.

        An unterminated block comment runs to the end of the input.
        """
        if self.config.strip_comments:
            with self.emitter.discarding():
                self._copy_block_comment()
        else:
            self._copy_block_comment()

    def _copy_line_comment(self) -> None:
        cursor = self.cursor
        self._copy_delimiter(self.config.comment_line)

        while cursor.more():
            if cursor.is_next_prefix("\r\n"):
                cursor.skip(2)
                break

            if cursor.is_next("\n") or cursor.is_next("\r"):
                cursor.skip_char()
                break

            self.emitter.write(cursor.next_char())

        self.emitter.write_newline()

    def _copy_block_comment(self) -> None:
        cursor = self.cursor
        start = self.config.comment_block_start
        end = self.config.comment_block_end

        self._copy_delimiter(start)
        level = 1

        while cursor.more():
            # The closing delimiter is checked before the opening one
            if cursor.is_next_prefix(end):
                self._copy_delimiter(end)
                level -= 1
                if level == 0:
                    return
                continue

            if cursor.is_next_prefix(start):
                self._copy_delimiter(start)
                level += 1
                continue

            self.emitter.write(cursor.next_char())

    def _copy_delimiter(self, delimiter: str) -> None:
        self.emitter.write_text(delimiter)
        self.cursor.skip(len(delimiter))
