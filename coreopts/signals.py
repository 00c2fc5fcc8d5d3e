# Coreopts CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals raised by the grammar engine.

These signals interrupt parsing when the user asks for help or version output.
They are not errors: the parse boundary converts them into an early exit with
status 0.

All signals inherit from `FlowSignal`, which is a subclass of `BaseException`
so they bypass standard `except Exception` blocks.

Signals:
- HelpSignal: `-h` / `--help` was encountered.
- VersionSignal: `--version` was encountered.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in coreopts."""


class HelpSignal(FlowSignal):
    """Raised to display help information."""

    def __init__(self, message: str = "Help signal received."):
        super().__init__(message)


class VersionSignal(FlowSignal):
    """Raised to display version information."""

    def __init__(self, message: str = "Version signal received."):
        super().__init__(message)
