import pytest
from pydantic import ValidationError

from coreopts.config import RawOption, loader
from coreopts.exceptions import OptionConfigError
from coreopts.outcome import EarlyExit

YAML_CONFIG = """
name: wc
version: "0.1.0"
syntax: "[OPTION]... [FILE]..."
summary: Print newline, word, and byte counts for each FILE.
options:
  - short: l
    long: lines
    description: Print the newline counts.
  - short: o
    long: output
    kind: option
    hint: FILE
    description: Write counts to FILE.
  - short: I
    long: ignore
    kind: multi
    hint: PATTERN
  - long: color
    kind: flag_optional
    hint: WHEN
  - short: v
    kind: flag_repeatable
  - short: q
    long: quiet
    short_aliases: [s]
    long_aliases: [silent]
"""

TOML_CONFIG = """
name = "wc"

[[options]]
short = "l"
long = "lines"
description = "Print the newline counts."

[[options]]
short = "o"
long = "output"
kind = "option"
hint = "FILE"
"""


def test_load_yaml(tmp_path):
    path = tmp_path / "wc.yaml"
    path.write_text(YAML_CONFIG)
    builder = loader(path)
    assert builder.help_text.name == "wc"
    assert builder.help_text.version == "0.1.0"
    assert builder.help_text.syntax == "wc [OPTION]... [FILE]..."
    assert [d.key for d in builder.descriptors] == [
        "lines",
        "output",
        "ignore",
        "color",
        "v",
        "quiet",
    ]

    matches = builder.parse(
        ["-l", "-o", "out", "-I", "a", "--ignore", "b", "--color", "-vv", "-s", "f"]
    )
    assert matches.is_present("l")
    assert matches.value_of("output") == "out"
    assert matches.values_of("I") == ["a", "b"]
    assert matches.is_present("color")
    assert matches.value_of("color") is None
    assert matches.is_present("v")
    assert matches.is_present("silent")
    assert matches.free == ("f",)


def test_load_toml(tmp_path):
    path = tmp_path / "wc.toml"
    path.write_text(TOML_CONFIG)
    matches = loader(str(path)).parse(["--lines", "-o", "out"])
    assert matches.is_present("l")
    assert matches.value_of("o") == "out"


def test_loaded_builder_version(tmp_path):
    path = tmp_path / "wc.yaml"
    path.write_text(YAML_CONFIG)
    outcome = loader(path).try_parse(["--version"])
    assert isinstance(outcome, EarlyExit)
    assert outcome.text == "wc 0.1.0\n"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        loader(tmp_path / "missing.yaml")


def test_unsupported_format(tmp_path):
    path = tmp_path / "wc.json"
    path.write_text("{}")
    with pytest.raises(ValueError, match="Unsupported config format"):
        loader(path)


def test_not_a_mapping(tmp_path):
    path = tmp_path / "wc.yaml"
    path.write_text("- just\n- a list\n")
    with pytest.raises(ValueError, match="must contain a mapping"):
        loader(path)


def test_invalid_path_type():
    with pytest.raises(TypeError):
        loader(42)  # type: ignore[arg-type]


def test_invalid_kind():
    with pytest.raises(ValidationError):
        RawOption(short="x", kind="many")


def test_aliases_only_on_flags():
    with pytest.raises(ValidationError):
        RawOption(short="o", kind="option", short_aliases=["p"])


def test_nameless_option_in_config(tmp_path):
    path = tmp_path / "wc.yaml"
    path.write_text("name: wc\noptions:\n  - description: nameless\n")
    with pytest.raises(OptionConfigError):
        loader(path)


def test_malformed_yaml(tmp_path):
    path = tmp_path / "wc.yaml"
    path.write_text("options: [\n  - short: l\n")
    with pytest.raises(ValueError, match="Invalid YAML"):
        loader(path)


def test_hint_on_flag_rejected():
    with pytest.raises(ValidationError):
        RawOption(short="l", kind="flag", hint="FILE")
    with pytest.raises(ValidationError):
        RawOption(short="v", kind="flag_repeatable", hint="N")
    assert RawOption(short="c", kind="flag_optional", hint="WHEN").hint == "WHEN"
