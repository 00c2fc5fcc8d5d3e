# Coreopts CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Help and version rendering for compiled option sets.

Help is rendered with Rich into an in-memory console so the result is a plain
string: the parse boundary can hand it back to the caller inside an
`EarlyExit` instead of printing it right away.

Layout:
    usage: <syntax, or a line generated from the options>

    <summary>

    options:
      -h, --help                     Show this help message.
      -o, --output OUTPUT            Write output to OUTPUT.

    <long help>
"""
from __future__ import annotations

from io import StringIO
from typing import Iterable

from rich.console import Console
from rich.markup import escape
from rich.padding import Padding
from rich.table import Table

from coreopts.help_text import HelpText
from coreopts.parser.descriptor import OptionDescriptor

HELP_WIDTH = 100
DESCRIPTION_COLUMN = 33


def get_options_text(descriptors: Iterable[OptionDescriptor]) -> str:
    """Render the visible options as a compact usage fragment."""
    options_list = []
    for descriptor in descriptors:
        if descriptor.hidden or descriptor.positional:
            continue
        value_text = descriptor.get_value_text()
        if value_text:
            options_list.append(f"[{descriptor.flags[0]} {value_text}]")
        else:
            options_list.append(f"[{descriptor.flags[0]}]")
    return " ".join(options_list)


def get_usage(help_text: HelpText, descriptors: Iterable[OptionDescriptor]) -> str:
    """Return the usage line: the declared syntax, or one built from the options."""
    if help_text.syntax:
        return help_text.syntax
    options_text = get_options_text(descriptors)
    if options_text:
        return f"{help_text.name} {options_text}"
    return help_text.name


def render_help(
    help_text: HelpText,
    descriptors: Iterable[OptionDescriptor],
    width: int = HELP_WIDTH,
) -> str:
    """
    Render the full help page for an option set.

    Args:
        help_text (HelpText): Program metadata.
        descriptors (Iterable[OptionDescriptor]): Options in declaration order.
        width (int): Wrap width of the rendered text.

    Returns:
        str: The help page as plain text.
    """
    descriptors = list(descriptors)
    buffer = StringIO()
    console = Console(
        file=buffer, width=width, color_system=None, highlight=False, emoji=False
    )

    usage = get_usage(help_text, descriptors)
    console.print(f"[bold]usage: {escape(usage)}[/bold]\n")

    if help_text.summary:
        console.print(escape(help_text.summary) + "\n")

    visible = [d for d in descriptors if not d.hidden and not d.positional]
    if visible:
        console.print("[bold]options:[/bold]")
        for descriptor in visible:
            flags = ", ".join(descriptor.flags)
            value_text = descriptor.get_value_text()
            flags_value = f"{flags} {value_text}" if value_text else flags
            description = escape(descriptor.description or "")
            if len(flags_value) > DESCRIPTION_COLUMN - 3:
                console.print(escape(f"  {flags_value}"))
                if description:
                    console.print(Padding(description, (0, 0, 0, DESCRIPTION_COLUMN)))
                continue
            row = Table.grid()
            row.add_column(width=DESCRIPTION_COLUMN, no_wrap=True)
            row.add_column()
            row.add_row(escape(f"  {flags_value}"), description)
            console.print(row)

    if help_text.long_help:
        console.print("\n" + escape(help_text.long_help))

    return buffer.getvalue()


def render_version(help_text: HelpText) -> str:
    """Render the `--version` output line."""
    if help_text.version:
        return f"{help_text.name} {help_text.version}\n"
    return f"{help_text.name}\n"
