"""A script as a queue of command blocks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Any


class Script:
    """Command blocks waiting to be executed, consumed front to back."""

    def __init__(self, commands: Iterable[tuple[Any, ...]] = ()) -> None:
        self._commands: deque[tuple[Any, ...]] = deque(commands)

    @classmethod
    def from_commands(cls, commands: Iterable[tuple[Any, ...]]) -> Script:
        """Build a script from blocks in the order they will run."""
        return cls(commands)

    def next_command(self) -> tuple[Any, ...] | None:
        """Remove and return the next block, or ``None`` when none are left."""
        return self._commands.popleft() if self._commands else None

    def __len__(self) -> int:
        return len(self._commands)

    def __repr__(self) -> str:
        return f"Script({list(self._commands)!r})"