"""Routing helpers that pull the related resource IDs out of ARI events.

Each query returns an empty list (or None for ``created``/``destroyed``) for
event types that carry no such information.
"""

from __future__ import annotations

from typing import Callable, Optional, TypeVar

from arikit.events import (
    BridgeCreated,
    BridgeDestroyed,
    BridgeMerged,
    ChannelCallerID,
    ChannelCreated,
    ChannelDialplan,
    ChannelDtmfReceived,
    ChannelEnteredBridge,
    ChannelHangupRequest,
    ChannelHold,
    ChannelLeftBridge,
    ChannelStateChange,
    ChannelTalkingStarted,
    ChannelUnhold,
    ChannelUserevent,
    ChannelVarset,
    ContactStatusChange,
    Dial,
    EndpointStateChange,
    EventData,
    PeerStatusChange,
    PlaybackContinuing,
    PlaybackFinished,
    PlaybackStarted,
    RecordingFailed,
    RecordingFinished,
    RecordingStarted,
    StasisEnd,
    StasisStart,
    TextMessageReceived,
)

T = TypeVar("T")
_Table = dict[type, Callable[[EventData], T]]


def resolve_target(typ: str, target_uri: str) -> str:
    """Return the id part of a ``type:id`` target URI if its type is ``typ``, else ""."""
    items = target_uri.split(":")
    if items[0] != typ or len(items) < 2:
        return ""
    return ":".join(items[1:])


def _targets(typ: str, target_uri: str) -> list[str]:
    resolved = resolve_target(typ, target_uri)
    return [resolved] if resolved else []


def _lookup(table: "_Table[T]", event: EventData) -> Optional[Callable[[EventData], T]]:
    for cls in type(event).__mro__:
        handler = table.get(cls)
        if handler is not None:
            return handler
    return None


def _single_channel(event) -> list[str]:
    return [event.channel.id]


def _dial_channels(event: Dial) -> list[str]:
    return [event.caller.id] + [i for i in (event.forwarded.id, event.peer.id) if i]


_CHANNEL_IDS: "_Table[list[str]]" = {
    BridgeCreated: lambda e: list(e.bridge.channel_ids),
    ChannelCallerID: _single_channel,
    ChannelCreated: _single_channel,
    ChannelDialplan: _single_channel,
    ChannelDtmfReceived: _single_channel,
    ChannelEnteredBridge: _single_channel,
    ChannelHangupRequest: _single_channel,
    ChannelHold: _single_channel,
    ChannelLeftBridge: _single_channel,
    ChannelStateChange: _single_channel,
    ChannelTalkingStarted: _single_channel,
    ChannelUnhold: _single_channel,
    ChannelUserevent: _single_channel,
    ChannelVarset: _single_channel,
    StasisEnd: _single_channel,
    Dial: _dial_channels,
    EndpointStateChange: lambda e: list(e.endpoint.channel_ids),
    PlaybackContinuing: lambda e: _targets("channel", e.playback.target_uri),
    PlaybackFinished: lambda e: _targets("channel", e.playback.target_uri),
    PlaybackStarted: lambda e: _targets("channel", e.playback.target_uri),
    RecordingFailed: lambda e: _targets("channel", e.recording.target_uri),
    RecordingFinished: lambda e: _targets("channel", e.recording.target_uri),
    RecordingStarted: lambda e: _targets("channel", e.recording.target_uri),
    StasisStart: lambda e: [e.channel.id] + ([e.replace_channel.id] if e.replace_channel.id else []),
}

_BRIDGE_IDS: "_Table[list[str]]" = {
    BridgeCreated: lambda e: [e.bridge.id],
    BridgeDestroyed: lambda e: [e.bridge.id],
    BridgeMerged: lambda e: [e.bridge.id, e.bridge_from.id],
    ChannelEnteredBridge: lambda e: [e.bridge.id],
    ChannelLeftBridge: lambda e: [e.bridge.id],
    ChannelUserevent: lambda e: [e.bridge.id],
    PlaybackContinuing: lambda e: _targets("bridge", e.playback.target_uri),
    PlaybackFinished: lambda e: _targets("bridge", e.playback.target_uri),
    PlaybackStarted: lambda e: _targets("bridge", e.playback.target_uri),
    RecordingFailed: lambda e: _targets("bridge", e.recording.target_uri),
    RecordingFinished: lambda e: _targets("bridge", e.recording.target_uri),
    RecordingStarted: lambda e: _targets("bridge", e.recording.target_uri),
}

_ENDPOINT_IDS: "_Table[list[str]]" = {
    cls: (lambda e: [e.endpoint.id])
    for cls in (
        ChannelUserevent,
        ContactStatusChange,
        EndpointStateChange,
        PeerStatusChange,
        TextMessageReceived,
    )
}

_PLAYBACK_IDS: "_Table[list[str]]" = {
    cls: (lambda e: [e.playback.id])
    for cls in (PlaybackContinuing, PlaybackFinished, PlaybackStarted)
}

_RECORDING_IDS: "_Table[list[str]]" = {
    cls: (lambda e: [e.recording.id])
    for cls in (RecordingFailed, RecordingFinished, RecordingStarted)
}


def _bridge_created(event: BridgeCreated) -> tuple[str, str]:
    ids = event.bridge.channel_ids
    return event.bridge.id, (ids[0] if ids else event.bridge.creator)


def _playback_started(event: PlaybackStarted) -> tuple[str, str]:
    items = event.playback.target_uri.split(":")
    return event.playback.id, (items[0] if len(items) == 1 else items[1])


_CREATED: "_Table[tuple[str, str]]" = {
    BridgeCreated: _bridge_created,
    ChannelEnteredBridge: lambda e: (e.bridge.id, e.channel.id),
    PlaybackStarted: _playback_started,
}

_DESTROYED: "_Table[str]" = {
    BridgeDestroyed: lambda e: e.bridge.id,
    PlaybackFinished: lambda e: e.playback.id,
    RecordingFailed: lambda e: e.recording.id,
    RecordingFinished: lambda e: e.recording.id,
}


def _ids(table: "_Table[list[str]]", event: EventData) -> list[str]:
    handler = _lookup(table, event)
    return handler(event) if handler is not None else []


def channel_ids(event: EventData) -> list[str]:
    """The channel IDs the event relates to."""
    return _ids(_CHANNEL_IDS, event)


def bridge_ids(event: EventData) -> list[str]:
    """The bridge IDs the event relates to."""
    return _ids(_BRIDGE_IDS, event)


def endpoint_ids(event: EventData) -> list[str]:
    """The endpoint IDs (``tech/resource``) the event relates to."""
    return _ids(_ENDPOINT_IDS, event)


def playback_ids(event: EventData) -> list[str]:
    """The playback IDs the event relates to."""
    return _ids(_PLAYBACK_IDS, event)


def recording_ids(event: EventData) -> list[str]:
    """The live recording IDs the event relates to."""
    return _ids(_RECORDING_IDS, event)


def created(event: EventData) -> Optional[tuple[str, str]]:
    """For events that create a resource: ``(created_id, related_id)``; otherwise None."""
    handler = _lookup(_CREATED, event)
    return handler(event) if handler is not None else None


def destroyed(event: EventData) -> Optional[str]:
    """For events that finish a resource: the finished resource's id; otherwise None."""
    handler = _lookup(_DESTROYED, event)
    return handler(event) if handler is not None else None