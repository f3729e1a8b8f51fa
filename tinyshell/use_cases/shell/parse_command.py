"""
Command line parser: one input line to a ParsedCommand.
"""

import re

from tinyshell.entities.command import ParsedCommand
from tinyshell.exceptions import ParseError

# Group 1 is the command word, group 2 everything after it verbatim.
_COMMAND_RE = re.compile(r"(\w+)(.*)", re.ASCII | re.DOTALL)
_WHITESPACE_RE = re.compile(r"\s+")


def split_arguments(text: str) -> tuple[str, ...]:
    """Split on whitespace runs; blank text gives no arguments, not ``("",)``."""
    stripped = text.strip()
    if not stripped:
        return ()
    return tuple(_WHITESPACE_RE.split(stripped))


def parse_command(line: str) -> ParsedCommand:
    """
    Parse one input line.

    Args:
        line: Raw line, with or without its terminator

    Returns:
        ParsedCommand with a lowercased name and whitespace-split arguments

    Raises:
        ParseError: If the line is blank or does not start with a word character
    """
    text = line.rstrip("\r\n").lstrip()
    match = _COMMAND_RE.match(text)
    if match is None:
        if text:
            raise ParseError(f"No command found in input: {text!r}")
        raise ParseError("No command found in input")
    name, rest = match.groups()
    return ParsedCommand(name=name.lower(), args=split_arguments(rest))
