"""Signal handling utilities for the jsonreflow CLI.

The CLI writes its whole output in one go, typically into a pipe. This module
records SIGPIPE (the reader went away, e.g. ``jsonreflow < big.json | head``) and
SIGINT (Ctrl+C) so that the writer can stop and the process can exit with the
conventional status instead of a traceback.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Any, Optional

# SIGPIPE does not exist on Windows
SIGPIPE: Optional[signal.Signals] = getattr(signal, "SIGPIPE", None)


class SignalHandler:
    """Records SIGPIPE and SIGINT for graceful interruption.

    Each handler restores the original disposition after the first delivery, so a
    second Ctrl+C behaves as usual.

    Attributes:
        sigpipe_received: Event that is set when a SIGPIPE signal is received.
        sigint_received: Event that is set when a SIGINT signal is received.
        original_sigpipe_handler: Original SIGPIPE handler, or None where the platform has no SIGPIPE.
        original_sigint_handler: Original SIGINT handler.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self.original_sigpipe_handler: Any = signal.getsignal(SIGPIPE) if SIGPIPE is not None else None
        self.original_sigint_handler: Any = signal.getsignal(signal.SIGINT)

    def interrupted(self) -> bool:
        """Return True once either signal has been received."""
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigpipe_received.set()
        if SIGPIPE is not None:
            signal.signal(SIGPIPE, self.original_sigpipe_handler)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigint_received.set()
        signal.signal(signal.SIGINT, self.original_sigint_handler)


# Create a singleton instance for the application
signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Install the SIGPIPE (where available) and SIGINT handlers."""
    if SIGPIPE is not None:
        signal.signal(SIGPIPE, signal_handler.handle_sigpipe)
    signal.signal(signal.SIGINT, signal_handler.handle_sigint)


def exit_status() -> int:
    """Return the exit status matching the signals received, 0 if none.

    Returns:
        141 after SIGPIPE, 130 after SIGINT, otherwise 0.
    """
    if signal_handler.sigpipe_received.is_set():
        return 141
    if signal_handler.sigint_received.is_set():
        return 130
    return 0


def cleanup() -> None:
    """Point stdout at the null device after an interruption.

    Registered with atexit, this keeps the interpreter from reporting a second
    broken pipe while flushing stdout during shutdown.
    """
    if signal_handler.interrupted():
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
