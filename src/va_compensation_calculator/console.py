import re
import sys
from collections import deque
from typing import Deque, Optional, TextIO

from va_compensation_calculator.exceptions import InputExhaustedError

# Longer tokens are discarded; 4300 is the interpreter's default int conversion limit.
_MAX_INT_DIGITS = 4300
_INT_TOKEN = re.compile(r"[+-]?\d{1,%d}" % _MAX_INT_DIGITS)


class ConsoleSession:
    """
    The console streams for one run of the calculator.

    Input is read one whitespace-separated token at a time, so several
    answers typed on one line are consumed by the following prompts.
    Use it as a context manager; output is flushed when the session ends.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._pending: Deque[str] = deque()
        self._closed = False

    def __enter__(self) -> "ConsoleSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._closed:
            return
        self._pending.clear()
        self._stdout.flush()
        self._closed = True

    def write(self, text: str = "") -> None:
        self._stdout.write(text)
        self._stdout.flush()

    def print(self, line: str = "") -> None:
        self.write(line + "\n")

    def next_token(self, prompt: Optional[str] = None) -> str:
        if prompt:
            self.write(prompt)

        while not self._pending:
            line = self._stdin.readline()
            if not line:
                raise InputExhaustedError()
            self._pending.extend(line.split())

        return self._pending.popleft()

    def next_int(self, prompt: str, retry_prompt: str) -> int:
        """Read an integer, discarding and re-prompting on anything else."""
        token = self.next_token(prompt)
        while True:
            if _INT_TOKEN.fullmatch(token):
                try:
                    return int(token)
                except ValueError:
                    # Too many digits to convert; discard it like any other bad token.
                    pass
            token = self.next_token(retry_prompt)
