"""Turning command blocks into what the screen and speakers should show."""

from __future__ import annotations

from dataclasses import dataclass

from vnreg.parser import (
    Command,
    Dialogue,
    Figure,
    PlayBgm,
    PlayVoice,
    SetBackground,
)
from vnreg.script import Script


@dataclass
class RenderBlock:
    """Everything one step of the script changes; ``None`` means unchanged."""

    dialogue: tuple[str, str] | None = None
    background: str | None = None
    bgm: str | None = None
    voice: str | None = None
    figure: tuple[str, str, str, str, str] | None = None


def apply_command(command: Command, block: RenderBlock) -> None:
    """Record the effect of one command in ``block``."""
    match command:
        case SetBackground(image=image):
            block.background = image
        case PlayBgm(track=track):
            block.bgm = track
        case Dialogue(speaker=speaker, text=text):
            block.dialogue = (speaker, text)
        case PlayVoice(clip=clip):
            block.voice = clip
        case Figure(name=name, distance=distance, body=body, face=face, position=position):
            block.figure = (name, distance, body, face, position)
        case _:
            pass


def execute_script(script: Script) -> RenderBlock | None:
    """Run the next non-empty block of ``script``; ``None`` once it is finished."""
    while (commands := script.next_command()) is not None:
        if not commands:
            continue
        block = RenderBlock()
        for command in commands:
            apply_command(command, block)
        return block
    return None