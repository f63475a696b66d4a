"""Coloured console output with a right-aligned sender column."""

from __future__ import annotations

import sys

MAX_SENDER_LENGTH = 16

MESSAGE_FORMAT = "\033[37m"
WARNING_FORMAT = "\033[33m"
ERROR_FORMAT = "\033[1;31m"
SUCCESS_FORMAT = "\033[1;32m"
CLEAR_FORMAT = "\033[0m"


def format_aligned(sender, message, *args):
    """Return one log line: the sender right-aligned in brackets, then the message.

    The message is a ``str.format`` template filled with ``args``. Senders
    longer than sixteen characters are not truncated, only left unpadded.
    """
    padding = " " * max(0, MAX_SENDER_LENGTH - len(sender))
    return f"{padding}[{sender}]  {message.format(*args)}"


def _emit(colour, sender, message, args):
    line = format_aligned(sender, message, *args)
    sys.stdout.write(f"{colour}{line}\n{CLEAR_FORMAT}")
    sys.stdout.flush()


def print_message(sender, message, *args):
    """Print an ordinary message in light grey."""
    _emit(MESSAGE_FORMAT, sender, message, args)


def print_success(sender, message, *args):
    """Print a success message in bold green."""
    _emit(SUCCESS_FORMAT, sender, message, args)


def print_warning(sender, message, *args):
    """Print a warning in yellow."""
    _emit(WARNING_FORMAT, sender, message, args)


def print_error(sender, message, *args):
    """Print an error in bold red."""
    _emit(ERROR_FORMAT, sender, message, args)