import pytest

from enginekit.console_log import (
    format_aligned,
    print_error,
    print_message,
    print_success,
    print_warning,
)


def test_format_aligned_pads_short_sender():
    assert format_aligned("Engine", "hello {}", 5) == "          [Engine]  hello 5"


@pytest.mark.parametrize("sender", ["a", "Core", "AssetManager", "sixteen-chars-xx"])
def test_bracket_always_closes_at_column_seventeen(sender):
    line = format_aligned(sender, "text")
    assert line.index("]") == 17
    assert line.endswith("]  text")


def test_long_sender_is_not_padded_or_truncated():
    sender = "a-very-long-sender-name"
    line = format_aligned(sender, "x")
    assert line.startswith(f"[{sender}]")


def test_format_arguments_are_substituted_in_order():
    line = format_aligned("S", "{} and {}", "first", 2)
    assert line.endswith("first and 2")


@pytest.mark.parametrize(
    "printer, colour",
    [
        (print_message, "\033[37m"),
        (print_success, "\033[1;32m"),
        (print_warning, "\033[33m"),
        (print_error, "\033[1;31m"),
    ],
)
def test_printers_wrap_line_in_colour(capsys, printer, colour):
    printer("Renderer", "frame {}", 3)
    out = capsys.readouterr().out
    assert out == colour + format_aligned("Renderer", "frame {}", 3) + "\n" + "\033[0m"