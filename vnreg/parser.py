"""Parsing of script text into blocks of commands.

A script is a sequence of blocks separated by blank lines. Each block
becomes a tuple of commands; a version declaration yields an empty tuple.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from vnreg.errors import (
    EmptyBlock,
    FigureTooShort,
    InvalidCommand,
    MalformedDialogue,
    UnknownLine,
    UnsupportedVersion,
)
from vnreg.script import Script

VERSION = 1

_OPEN_QUOTE = "\u201c"
_CLOSE_QUOTE = "\u201d"
_UNSIGNED = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class SetBackground:
    image: str


@dataclass(frozen=True)
class PlayBgm:
    track: str


@dataclass(frozen=True)
class PlayVoice:
    clip: str


@dataclass(frozen=True)
class Dialogue:
    speaker: str
    text: str


@dataclass(frozen=True)
class Figure:
    name: str
    distance: str
    body: str
    face: str
    position: str


@dataclass(frozen=True)
class Choice:
    options: tuple[tuple[str, str], ...]


@dataclass(frozen=True)
class Jump:
    label: str


@dataclass(frozen=True)
class Label:
    name: str


Command = SetBackground | PlayBgm | PlayVoice | Dialogue | Figure | Choice | Jump | Label

_SIMPLE_COMMANDS = {
    "bg": SetBackground,
    "bgm": PlayBgm,
    "voice": PlayVoice,
    "jump": Jump,
    "label": Label,
}


def parse_script(text: str) -> Script:
    """Parse a whole script into a :class:`Script` of command blocks."""
    blocks: list[tuple[Command, ...]] = []
    block_lines: list[tuple[int, str]] = []

    for lineno, raw in enumerate(text.split("\n"), start=1):
        line = raw.strip()
        if line:
            block_lines.append((lineno, line))
        elif block_lines:
            blocks.append(parse_block(block_lines))
            block_lines = []

    if block_lines:
        blocks.append(parse_block(block_lines))

    return Script.from_commands(blocks)


def _parse_figure(arg: str) -> Figure:
    parts = [part.strip() for part in arg.split("|")]
    if len(parts) < 5:
        raise FigureTooShort()
    name, distance, body, face, position = parts[:5]
    return Figure(name, distance, body, face, position)


def _parse_at_command(line_num: int, line: str) -> Command:
    cmd, sep, arg = line[1:].partition(" ")
    if not sep:
        raise InvalidCommand(line_num, line)
    if cmd == "fg":
        return _parse_figure(arg)
    factory = _SIMPLE_COMMANDS.get(cmd)
    if factory is None:
        raise InvalidCommand(line_num, line)
    return factory(arg)


def _check_directive(line_num: int, line: str) -> None:
    cmd, sep, arg = line[1:].partition(" ")
    if not sep:
        raise InvalidCommand(line_num, line)
    if cmd != "version":
        raise UnknownLine(line_num, line)
    version = int(arg) if _UNSIGNED.fullmatch(arg) else 0
    if version != VERSION:
        raise UnsupportedVersion(VERSION, arg)


def parse_block(lines: Sequence[tuple[int, str]]) -> tuple[Command, ...]:
    """Parse one block of ``(line number, text)`` pairs into its commands."""
    if not lines:
        raise ValueError("a block needs at least one line")

    commands: list[Command] = []
    for line_num, line in lines:
        if line.startswith("@"):
            commands.append(_parse_at_command(line_num, line))
        elif line.startswith("%"):
            _check_directive(line_num, line)
            return ()
        elif line.startswith("#"):
            continue
        elif _OPEN_QUOTE in line:
            speaker, _, rest = line.partition(_OPEN_QUOTE)
            if not rest.endswith(_CLOSE_QUOTE):
                raise MalformedDialogue(line_num, line)
            text = rest[: -len(_CLOSE_QUOTE)]
            commands.append(Dialogue(speaker.strip(), text.strip()))
            break
        else:
            raise UnknownLine(line_num, line)

    if not commands:
        raise EmptyBlock(lines[0][0])
    return tuple(commands)