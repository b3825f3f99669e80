"""Where the engine finds its assets, and how volumes combine."""

from __future__ import annotations

BACKGROUND_PATH = "./source/background/"
VOICE_PATH = "./source/voice/"
BGM_PATH = "./source/bgm/"
FG_PATH = "./source/figure/"


def background_path(name: str) -> str:
    """Path of the background image ``name``."""
    return f"{BACKGROUND_PATH}{name}"


def figure_paths(name: str, distance: str, body: str, face: str) -> tuple[str, str]:
    """Paths of the body and face images of a figure at a given distance."""
    base = f"{FG_PATH}{name}/{distance}/"
    return f"{base}{body}.png", f"{base}{face}.png"


def voice_path(name: str) -> str:
    """Path of the voice clip ``name``."""
    return f"{VOICE_PATH}{name}"


def bgm_path(name: str) -> str:
    """Path of the music track ``name``."""
    return f"{BGM_PATH}{name}"


def mix_volume(main: float, channel: float) -> float:
    """Combine a main and a channel volume, both in percent, into a gain."""
    return (main / 100.0) * (channel / 100.0)