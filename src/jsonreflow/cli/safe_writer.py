"""Signal-aware output writing for the jsonreflow CLI."""

import errno
import os
import types
from typing import Optional, Type

from jsonreflow.cli.signal_handler import signal_handler


class SafeWriter:
    """Writes formatted output to a file descriptor, stopping on interruption.

    Output is written with ``os.write`` in a loop until every byte has been accepted,
    since a single call may write only part of a large buffer to a pipe. The file
    descriptor is borrowed: closing the writer does not close it.

    Attributes:
        fd: The file descriptor being written to.
    """

    def __init__(self, fd: int):
        """Initialize the safe writer.

        Args:
            fd: File descriptor to write to, normally that of stdout.

        Raises:
            TypeError: If ``fd`` is not an integer.
        """
        if not isinstance(fd, int):
            raise TypeError(f"Expected a file descriptor, got {type(fd).__name__}")
        self.fd = fd
        self._closed = False

    def write(self, data: bytes) -> None:
        """Write all of ``data``, checking for interruption between chunks.

        Args:
            data: Bytes to write.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received, or the pipe is broken.
            OSError: If an I/O error occurs during writing.
            ValueError: If attempting to write to a closed writer.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        view = memoryview(data)
        while view:
            if signal_handler.interrupted():
                raise BrokenPipeError()

            try:
                written = os.write(self.fd, view)
            except OSError as e:
                if e.errno == errno.EPIPE:
                    raise BrokenPipeError()
                raise
            view = view[written:]

    def close(self) -> None:
        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        self.close()
