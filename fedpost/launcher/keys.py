"""
Single-key input for the launcher menu.

decode_key() turns raw terminal bytes into one of four key events:

  ESC [ A        → "up"
  ESC [ B        → "down"
  CR or LF       → "confirm"
  anything else  → "other"

After an ESC byte, at most two follow-up bytes are read within
ESCAPE_TIMEOUT seconds. Whatever arrives in that window is consumed even
when it is not a recognised sequence, so it cannot leak into the next read.

The decoder only sees a ByteSource. TerminalByteSource is the real one:
it puts stdin into cbreak mode for one key read and restores it afterwards,
so line reads elsewhere (input()) behave normally.
"""

from __future__ import annotations

import os
import select
import sys
import termios
import time
import tty
from typing import Literal, Protocol


Key = Literal["up", "down", "confirm", "other"]

UP: Key = "up"
DOWN: Key = "down"
CONFIRM: Key = "confirm"
OTHER: Key = "other"

ESC = b"\x1b"
ESCAPE_TIMEOUT = 0.1

_SEQUENCES: dict[bytes, Key] = {
    b"[A": UP,
    b"[B": DOWN,
}

_CONFIRM_BYTES = frozenset((b"\r", b"\n"))


class ByteSource(Protocol):
    def read(self, timeout: float | None = None) -> bytes:
        """
        Return exactly one byte.

        With a timeout, return b"" if nothing arrived in time.
        Raise EOFError when the stream is closed.
        """


# ── Decoder ───────────────────────────────────────────────────────────────────

def decode_key(source: ByteSource, escape_timeout: float = ESCAPE_TIMEOUT) -> Key:
    """Block for one key event from source and classify it."""
    first = source.read()

    if first == ESC:
        return _SEQUENCES.get(_read_escape_tail(source, escape_timeout), OTHER)
    if first in _CONFIRM_BYTES:
        return CONFIRM
    return OTHER


def _read_escape_tail(source: ByteSource, timeout: float) -> bytes:
    """Read up to two bytes, all within one shared deadline."""
    deadline = time.monotonic() + timeout
    tail = b""
    while len(tail) < 2:
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            break
        byte = source.read(timeout=remaining)
        if not byte:
            break
        tail += byte
    return tail


# ── Terminal source ───────────────────────────────────────────────────────────

class TerminalByteSource:
    """Unbuffered byte reads from a terminal file descriptor."""

    def __init__(self, fd: int | None = None) -> None:
        self.fd = sys.stdin.fileno() if fd is None else fd

    def read(self, timeout: float | None = None) -> bytes:
        if timeout is not None:
            ready, _, _ = select.select([self.fd], [], [], timeout)
            if not ready:
                return b""
        byte = os.read(self.fd, 1)
        if not byte:
            raise EOFError("terminal input closed")
        return byte


def read_key(fd: int | None = None) -> Key:
    """
    Read one key event from the terminal in cbreak mode.

    Echo and line buffering are off only while this call runs.
    """
    source = TerminalByteSource(fd)
    saved = termios.tcgetattr(source.fd)
    try:
        tty.setcbreak(source.fd)
        return decode_key(source)
    finally:
        termios.tcsetattr(source.fd, termios.TCSADRAIN, saved)
