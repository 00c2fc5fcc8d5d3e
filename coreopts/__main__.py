"""
Coreopts CLI Options

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Command-line entry point: parse arguments against an option set declared in
a YAML or TOML file and show what each option received.

    coreopts wc.yaml -- -l --output counts.txt notes.txt
"""
from __future__ import annotations

import logging
import sys
from typing import Sequence

from rich.table import Table

from coreopts.app import app
from coreopts.builder import CompiledOptions
from coreopts.config import loader
from coreopts.console import console, error_console
from coreopts.exceptions import CoreOptsError
from coreopts.matches import Matches
from coreopts.parser.descriptor import OptionDescriptor
from coreopts.utils import setup_logging
from coreopts.version import __version__


def get_options() -> CompiledOptions:
    return (
        app(
            "[OPTION]... CONFIG [-- ARG...]",
            "Parse ARGs against the options declared in CONFIG and show the result.",
            "CONFIG is a YAML (.yaml, .yml) or TOML (.toml) file. "
            "Put ARGs after '--' so they are not read as options of this command.",
            name="coreopts",
            version=__version__,
        )
        .flag("v", "verbose", "Enable debug logging.")
        .option("", "log-mode", "Logging output mode: cli or json.", "MODE")
        .compile()
    )


def render_matches(
    descriptors: Sequence[OptionDescriptor], matches: Matches
) -> Table:
    table = Table(title="Matches", show_lines=False)
    table.add_column("Option", style="bold")
    table.add_column("Present")
    table.add_column("Values")
    for descriptor in descriptors:
        table.add_row(
            ", ".join(descriptor.flags),
            "yes" if matches.is_present(descriptor.key) else "no",
            " ".join(matches.values_of(descriptor.key)),
        )
    return table


def main(argv: Sequence[str] | None = None) -> int:
    matches = get_options().parse(argv)
    if matches.is_present("verbose") or matches.is_present("log-mode"):
        try:
            setup_logging(
                mode=matches.value_of("log-mode"),
                console_log_level=(
                    logging.DEBUG if matches.is_present("v") else logging.WARNING
                ),
            )
        except ValueError as error:
            error_console.print(f"coreopts: {error}", markup=False)
            return 1

    if not matches.free:
        error_console.print("coreopts: missing CONFIG argument", markup=False)
        return 1

    config_path, *args = matches.free
    try:
        builder = loader(config_path)
        compiled = builder.compile()
    except (OSError, ValueError, CoreOptsError) as error:
        error_console.print(f"coreopts: {error}", markup=False)
        return 1

    result = compiled.parse(args)
    console.print(render_matches(builder.descriptors, result))
    console.print(f"free: {' '.join(result.free)}", markup=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
