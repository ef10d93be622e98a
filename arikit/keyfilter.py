"""Filters that select keys of one resource kind from a list."""

from __future__ import annotations

from typing import Iterable

from arikit.key import (
    APPLICATION_KEY,
    BRIDGE_KEY,
    CHANNEL_KEY,
    DEVICE_STATE_KEY,
    ENDPOINT_KEY,
    LIVE_RECORDING_KEY,
    LOGGING_KEY,
    MAILBOX_KEY,
    MODULE_KEY,
    PLAYBACK_KEY,
    SOUND_KEY,
    STORED_RECORDING_KEY,
    VARIABLE_KEY,
    Key,
)


def kind(kind: str, keys: Iterable[Key]) -> list[Key]:
    """Return the keys whose kind equals ``kind``, in order."""
    return [k for k in keys if k.kind == kind]


def applications(keys: Iterable[Key]) -> list[Key]:
    return kind(APPLICATION_KEY, keys)


def bridges(keys: Iterable[Key]) -> list[Key]:
    return kind(BRIDGE_KEY, keys)


def channels(keys: Iterable[Key]) -> list[Key]:
    return kind(CHANNEL_KEY, keys)


def device_states(keys: Iterable[Key]) -> list[Key]:
    return kind(DEVICE_STATE_KEY, keys)


def endpoints(keys: Iterable[Key]) -> list[Key]:
    return kind(ENDPOINT_KEY, keys)


def live_recordings(keys: Iterable[Key]) -> list[Key]:
    return kind(LIVE_RECORDING_KEY, keys)


def loggings(keys: Iterable[Key]) -> list[Key]:
    return kind(LOGGING_KEY, keys)


def mailboxes(keys: Iterable[Key]) -> list[Key]:
    return kind(MAILBOX_KEY, keys)


def modules(keys: Iterable[Key]) -> list[Key]:
    return kind(MODULE_KEY, keys)


def playbacks(keys: Iterable[Key]) -> list[Key]:
    return kind(PLAYBACK_KEY, keys)


def sounds(keys: Iterable[Key]) -> list[Key]:
    return kind(SOUND_KEY, keys)


def stored_recordings(keys: Iterable[Key]) -> list[Key]:
    return kind(STORED_RECORDING_KEY, keys)


def variables(keys: Iterable[Key]) -> list[Key]:
    return kind(VARIABLE_KEY, keys)