from coreopts.help_text import HelpTextBuilder
from coreopts.parser import Arity, OptionDescriptor, get_usage, render_help, render_version

DESCRIPTORS = [
    OptionDescriptor("h", "help", "Show this help message."),
    OptionDescriptor("v", "verbose", "Print more output."),
    OptionDescriptor("o", "output", "Write output to FILE.", "FILE", Arity.REQUIRED_ONE),
    OptionDescriptor(long_name="ARGS", arity=Arity.REPEATED, positional=True, hidden=True),
]


def test_usage_from_syntax():
    help_text = HelpTextBuilder("cat").syntax("[OPTION]... [FILE]...").build()
    assert get_usage(help_text, DESCRIPTORS) == "cat [OPTION]... [FILE]..."


def test_usage_generated_from_options():
    help_text = HelpTextBuilder("cat").build()
    assert get_usage(help_text, DESCRIPTORS) == "cat [-h] [-v] [-o FILE]"
    assert get_usage(help_text, []) == "cat"


def test_render_help():
    help_text = (
        HelpTextBuilder("cat")
        .syntax("[OPTION]... [FILE]...")
        .summary("Concatenate FILE(s) to standard output.")
        .long_help("With no FILE, or when FILE is -, read standard input.")
        .build()
    )
    text = render_help(help_text, DESCRIPTORS)
    assert text.startswith("usage: cat [OPTION]... [FILE]...\n")
    assert "Concatenate FILE(s) to standard output." in text
    assert "options:" in text
    assert "-h, --help" in text
    assert "-o, --output FILE" in text
    assert "Write output to FILE." in text
    assert "ARGS" not in text
    assert text.rstrip().endswith("With no FILE, or when FILE is -, read standard input.")
    assert "\x1b[" not in text


def test_render_help_long_flags_wrap_description():
    descriptors = [
        OptionDescriptor(
            "x",
            "an-extremely-long-option-name",
            "Described below.",
            "VALUE",
            Arity.REQUIRED_ONE,
        )
    ]
    text = render_help(HelpTextBuilder("tool").build(), descriptors)
    lines = text.splitlines()
    flag_line = next(line for line in lines if "--an-extremely-long-option-name" in line)
    assert "Described below." not in flag_line
    assert any(line.strip() == "Described below." for line in lines)


def test_render_version():
    assert render_version(HelpTextBuilder("cat").version("1.2.3").build()) == "cat 1.2.3\n"
    assert render_version(HelpTextBuilder("cat").build()) == "cat\n"


def test_render_help_wrapped_description_keeps_column():
    description = " ".join(["Wrapped words in a long option description."] * 4)
    descriptors = [
        OptionDescriptor("v", "verbose", description),
        OptionDescriptor(
            "x", "an-extremely-long-option-name", description, "VALUE", Arity.REQUIRED_ONE
        ),
    ]
    text = render_help(HelpTextBuilder("tool").build(), descriptors)
    lines = [line.rstrip() for line in text.splitlines()]
    start = lines.index("options:") + 1
    body = [line for line in lines[start:] if line]
    flag_line = body[0]
    assert flag_line.startswith("  -v, --verbose")
    assert flag_line.index("Wrapped") == 33
    described = [line for line in body if "--" not in line]
    assert len(described) >= 2
    for line in described:
        assert line.startswith(" " * 33)
        assert not line[33].isspace()
