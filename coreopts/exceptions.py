# Coreopts CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by coreopts.

There are two families of failures:

- Configuration errors are programmer mistakes made while declaring options
  (an option with no name, an invalid name, a name registered twice). They are
  raised at declaration time, before any parsing happens, and are not meant to
  be caught.
- Usage errors are user mistakes found by the grammar engine while walking the
  argument vector (unknown option, missing value, repeated single option).
  The parse boundary turns them into a `<program>: <message>` report on stderr
  and exit code 1.

Exception Hierarchy:
- CoreOptsError
    ├── OptionConfigError
    │   └── DuplicateOptionError
    └── UsageError
"""


class CoreOptsError(Exception):
    """Base exception for coreopts."""


class OptionConfigError(CoreOptsError):
    """Exception raised when an option is declared incorrectly."""


class DuplicateOptionError(OptionConfigError):
    """Exception raised when an option name is registered more than once."""


class UsageError(CoreOptsError):
    """Exception raised when the argument vector does not match the declared options."""
