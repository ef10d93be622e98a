"""Playback resources: state data and a handle for operating on one playback."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol

from arikit.key import Key


class PlaybackBackend(Protocol):
    """The transport operations a playback handle relies on."""

    def data(self, key: Key) -> "PlaybackData": ...

    def control(self, key: Key, op: str) -> None: ...

    def stop(self, key: Key) -> None: ...

    def subscribe(self, key: Key, *event_types: str) -> Any: ...


@dataclass
class PlaybackData:
    """The state of a playback."""

    key: Optional[Key] = None
    id: str = ""
    language: str = ""
    media_uri: str = ""
    state: str = ""
    target_uri: str = ""


class PlaybackHandle:
    """A reference to a playback, possibly staged for later execution."""

    def __init__(
        self,
        key: Key,
        playback: PlaybackBackend,
        exec: Optional[Callable[["PlaybackHandle"], None]] = None,
    ) -> None:
        self._key = key
        self._playback = playback
        self._exec = exec
        self._executed = False

    @property
    def id(self) -> str:
        return self._key.id

    @property
    def key(self) -> Key:
        return self._key

    def data(self) -> PlaybackData:
        return self._playback.data(self._key)

    def control(self, op: str) -> None:
        """Apply a control operation: restart, pause, unpause, reverse or forward."""
        self._playback.control(self._key, op)

    def stop(self) -> None:
        self._playback.stop(self._key)

    def subscribe(self, *event_types: str) -> Any:
        return self._playback.subscribe(self._key, *event_types)

    def exec(self) -> None:
        """Run the staged operation, at most once; later calls do nothing."""
        if self._executed:
            return
        self._executed = True
        func, self._exec = self._exec, None
        if func is not None:
            func(self)