"""Playback of background music and voice clips on one output channel."""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any


def _default_mixer() -> Any:
    from pygame import mixer

    if not mixer.get_init():
        mixer.init()
    return mixer


class Player:
    """Plays one sound at a time; starting a new one stops the previous one.

    ``mixer`` is any object offering ``Sound(file)`` whose sounds have
    ``play(loops=...)`` returning a channel with ``set_volume`` and ``stop``.
    By default the pygame mixer is opened.
    """

    def __init__(self, mixer: Any = None) -> None:
        self._mixer = mixer if mixer is not None else _default_mixer()
        self._lock = threading.Lock()
        self._channel: Any = None

    @property
    def playing(self) -> bool:
        """Whether a sound has been started and not stopped since."""
        with self._lock:
            return self._channel is not None

    def _take_and_stop(self) -> None:
        with self._lock:
            channel, self._channel = self._channel, None
        if channel is not None:
            channel.stop()

    def _start(self, path: str | Path, volume: float, loops: int) -> None:
        self._take_and_stop()
        with open(path, "rb") as source:
            sound = self._mixer.Sound(source)
        channel = sound.play(loops=loops)
        if channel is None:
            raise RuntimeError(f"no free output channel to play {path}")
        channel.set_volume(volume)
        with self._lock:
            self._channel = channel

    def play_loop(self, path: str | Path, volume: float) -> None:
        """Play ``path`` repeatedly without end at ``volume``."""
        self._start(path, volume, loops=-1)

    def play_voice(self, path: str | Path, volume: float) -> None:
        """Play ``path`` once at ``volume``."""
        self._start(path, volume, loops=0)

    def stop(self) -> None:
        """Stop whatever is playing."""
        self._take_and_stop()

    def change_volume(self, volume: float) -> None:
        """Set the volume of the current sound, if any."""
        with self._lock:
            if self._channel is not None:
                self._channel.set_volume(volume)