"""
Parsed command domain entity.
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence


def argument_at(
    args: Sequence[str], index: int, default: Optional[str] = None
) -> Optional[str]:
    """
    Return the argument at ``index`` or ``default`` when it is absent.

    Only a missing position falls back to the default. A present but empty
    token is returned as-is so callers decide what empty means for them.

    Args:
        args: Ordered argument tokens
        index: Zero-based position to read
        default: Value returned when ``index`` is out of range

    Returns:
        The argument or the default
    """
    if index < 0:
        raise IndexError(f"Argument index must not be negative: {index}")
    if index < len(args):
        return args[index]
    return default


@dataclass(frozen=True)
class ParsedCommand:
    """A command name and its argument tokens, split from one input line."""

    name: str
    args: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not self.name:
            raise ValueError("Command name must be a non-empty string")

    def arg(self, index: int, default: Optional[str] = None) -> Optional[str]:
        return argument_at(self.args, index, default)

    def __str__(self) -> str:
        return " ".join((self.name, *self.args))
