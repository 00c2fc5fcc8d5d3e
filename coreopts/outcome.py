# Coreopts CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Parse outcomes other than a successful `Matches`.

`CompiledOptions.try_parse()` returns either a `Matches` or an `EarlyExit`.
An `EarlyExit` carries the text to show, the stream to show it on and the
process exit code, and leaves the decision to terminate to the caller:

    outcome = options.try_parse(argv)
    if isinstance(outcome, EarlyExit):
        outcome.exit()

`CompiledOptions.parse()` does exactly that on the caller's behalf.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NoReturn, Union

from coreopts.console import console, error_console
from coreopts.matches import Matches


class OutputStream(Enum):
    """Standard stream an early exit writes to."""

    STDOUT = "stdout"
    STDERR = "stderr"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class EarlyExit:
    """
    Help, version or usage-error outcome of a parse.

    Attributes:
        code (int): Process exit code, 0 for help/version and 1 for usage errors.
        text (str): Text to write.
        stream (OutputStream): Where to write it.
    """

    code: int
    text: str
    stream: OutputStream = OutputStream.STDOUT

    @property
    def is_error(self) -> bool:
        return self.code != 0

    def emit(self) -> None:
        """Write the text to its stream."""
        target = error_console if self.stream is OutputStream.STDERR else console
        target.print(
            self.text,
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
            end="",
        )

    def exit(self) -> NoReturn:
        """Write the text and terminate with the exit code."""
        self.emit()
        raise SystemExit(self.code)


ParseOutcome = Union[Matches, EarlyExit]
