import pytest

from coreopts.help_text import HelpText, HelpTextBuilder


def test_builder_defaults():
    help_text = HelpTextBuilder("ls").build()
    assert help_text == HelpText(name="ls")
    assert help_text.version is None
    assert help_text.syntax is None


def test_builder_chaining():
    help_text = (
        HelpTextBuilder("ls")
        .version("9.4")
        .syntax("[OPTION]... [FILE]...")
        .summary("List directory contents.")
        .long_help("Sort entries alphabetically.")
        .build()
    )
    assert help_text.name == "ls"
    assert help_text.version == "9.4"
    assert help_text.syntax == "ls [OPTION]... [FILE]..."
    assert help_text.summary == "List directory contents."
    assert help_text.long_help == "Sort entries alphabetically."


def test_help_text_is_frozen():
    help_text = HelpTextBuilder("ls").build()
    with pytest.raises(AttributeError):
        help_text.name = "dir"
