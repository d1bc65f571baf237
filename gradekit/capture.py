"""Capture of standard output and error, and injection into standard input."""

from __future__ import annotations

import io
import sys
from typing import TextIO


class _InjectedStdin(io.TextIOBase):
    """Standard input that yields injected text before the wrapped stream."""

    def __init__(self, pending: str, base: TextIO) -> None:
        super().__init__()
        self.pending = pending
        self.base = base

    def readable(self) -> bool:
        return True

    def read(self, size: int | None = -1) -> str:
        if size is None or size < 0:
            data, self.pending = self.pending, ""
            return data + self.base.read()
        data, self.pending = self.pending[:size], self.pending[size:]
        if len(data) < size:
            data += self.base.read(size - len(data))
        return data

    def readline(self, size: int | None = -1) -> str:
        limit = -1 if size is None else size
        newline = self.pending.find("\n")
        if newline >= 0:
            end = newline + 1
            if 0 <= limit < end:
                end = limit
            line, self.pending = self.pending[:end], self.pending[end:]
            return line
        if 0 <= limit <= len(self.pending):
            line, self.pending = self.pending[:limit], self.pending[limit:]
            return line
        line, self.pending = self.pending, ""
        rest = -1 if limit < 0 else limit - len(line)
        return line + self.base.readline(rest)


class OutputCapture:
    """Redirects sys.stdout and sys.stderr into buffers; begins on creation unless deferred."""

    def __init__(self, defer_capture: bool = False) -> None:
        self._stdout_buffer = io.StringIO()
        self._stderr_buffer = io.StringIO()
        self._old_stdout: TextIO | None = None
        self._old_stderr: TextIO | None = None
        if not defer_capture:
            self.begin_capture()

    @property
    def capturing(self) -> bool:
        return self._old_stdout is not None

    @property
    def stdout(self) -> str:
        """Standard output captured so far."""
        self.flush()
        return self._stdout_buffer.getvalue()

    @property
    def stderr(self) -> str:
        """Standard error captured so far."""
        self.flush()
        return self._stderr_buffer.getvalue()

    def begin_capture(self) -> None:
        """Start capturing into fresh buffers."""
        self.end_capture()
        self._stdout_buffer = io.StringIO()
        self._stderr_buffer = io.StringIO()
        self._old_stdout, sys.stdout = sys.stdout, self._stdout_buffer
        self._old_stderr, sys.stderr = sys.stderr, self._stderr_buffer

    def end_capture(self) -> None:
        """Stop capturing, keeping what was captured so far."""
        self.flush()
        if self._old_stdout is not None:
            sys.stdout = self._old_stdout
            self._old_stdout = None
        if self._old_stderr is not None:
            sys.stderr = self._old_stderr
            self._old_stderr = None

    def flush(self) -> None:
        """Flush the current standard streams."""
        sys.stdout.flush()
        sys.stderr.flush()

    def __enter__(self) -> OutputCapture:
        if not self.capturing:
            self.begin_capture()
        return self

    def __exit__(self, *args: object) -> None:
        self.end_capture()

    @staticmethod
    def inject_to_stdin(s: str) -> None:
        """Make s the next text read from standard input."""
        current = sys.stdin
        if isinstance(current, _InjectedStdin):
            current.pending = s + current.pending
        else:
            sys.stdin = _InjectedStdin(s, current)