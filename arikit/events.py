"""ARI events: the entities they carry and the resource keys they relate to."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar, Optional

from arikit.key import (
    BRIDGE_KEY,
    CHANNEL_KEY,
    DEVICE_STATE_KEY,
    ENDPOINT_KEY,
    LIVE_RECORDING_KEY,
    PLAYBACK_KEY,
    Key,
    Keys,
    endpoint_id,
)
from arikit.playback import PlaybackData
from arikit.recordings import LiveRecordingData


class EventTypes:
    """Names of the ARI event types, plus ``ALL`` to subscribe to every type."""

    ALL = "all"
    APPLICATION_MOVE_FAILED = "ApplicationMoveFailed"
    APPLICATION_REPLACED = "ApplicationReplaced"
    BRIDGE_ATTENDED_TRANSFER = "BridgeAttendedTransfer"
    BRIDGE_BLIND_TRANSFER = "BridgeBlindTransfer"
    BRIDGE_CREATED = "BridgeCreated"
    BRIDGE_DESTROYED = "BridgeDestroyed"
    BRIDGE_MERGED = "BridgeMerged"
    BRIDGE_VIDEO_SOURCE_CHANGED = "BridgeVideoSourceChanged"
    CHANNEL_CALLER_ID = "ChannelCallerId"
    CHANNEL_CONNECTED_LINE = "ChannelConnectedLine"
    CHANNEL_CREATED = "ChannelCreated"
    CHANNEL_DESTROYED = "ChannelDestroyed"
    CHANNEL_DIALPLAN = "ChannelDialplan"
    CHANNEL_DTMF_RECEIVED = "ChannelDtmfReceived"
    CHANNEL_ENTERED_BRIDGE = "ChannelEnteredBridge"
    CHANNEL_HANGUP_REQUEST = "ChannelHangupRequest"
    CHANNEL_HOLD = "ChannelHold"
    CHANNEL_LEFT_BRIDGE = "ChannelLeftBridge"
    CHANNEL_STATE_CHANGE = "ChannelStateChange"
    CHANNEL_TALKING_FINISHED = "ChannelTalkingFinished"
    CHANNEL_TALKING_STARTED = "ChannelTalkingStarted"
    CHANNEL_UNHOLD = "ChannelUnhold"
    CHANNEL_USEREVENT = "ChannelUserevent"
    CHANNEL_VARSET = "ChannelVarset"
    CONTACT_INFO = "ContactInfo"
    CONTACT_STATUS_CHANGE = "ContactStatusChange"
    DEVICE_STATE_CHANGED = "DeviceStateChanged"
    DIAL = "Dial"
    ENDPOINT_STATE_CHANGE = "EndpointStateChange"
    MISSING_PARAMS = "MissingParams"
    PEER = "Peer"
    PEER_STATUS_CHANGE = "PeerStatusChange"
    PLAYBACK_CONTINUING = "PlaybackContinuing"
    PLAYBACK_FINISHED = "PlaybackFinished"
    PLAYBACK_STARTED = "PlaybackStarted"
    RECORDING_FAILED = "RecordingFailed"
    RECORDING_FINISHED = "RecordingFinished"
    RECORDING_STARTED = "RecordingStarted"
    STASIS_END = "StasisEnd"
    STASIS_START = "StasisStart"
    TEXT_MESSAGE_RECEIVED = "TextMessageReceived"


@dataclass
class ChannelData:
    """The state of a channel as carried by events."""

    key: Optional[Key] = None
    id: str = ""
    name: str = ""
    state: str = ""
    account_code: str = ""
    caller: dict[str, str] = field(default_factory=dict)
    connected: dict[str, str] = field(default_factory=dict)
    dialplan: dict[str, Any] = field(default_factory=dict)
    creation_time: str = ""
    language: str = ""
    channel_vars: dict[str, str] = field(default_factory=dict)


@dataclass
class BridgeData:
    """The state of a bridge as carried by events."""

    key: Optional[Key] = None
    id: str = ""
    bridge_class: str = ""
    bridge_type: str = ""
    channel_ids: list[str] = field(default_factory=list)
    creator: str = ""
    name: str = ""
    technology: str = ""
    video_mode: str = ""
    video_source_id: str = ""


@dataclass
class EndpointData:
    """The state of an endpoint as carried by events."""

    key: Optional[Key] = None
    technology: str = ""
    resource: str = ""
    state: str = ""
    channel_ids: list[str] = field(default_factory=list)

    @property
    def id(self) -> str:
        return endpoint_id(self.technology, self.resource)


@dataclass
class DeviceStateData:
    """The state of a device."""

    key: Optional[Key] = None
    name: str = ""
    state: str = ""


@dataclass
class EventData:
    """Metadata common to every event; subclasses add their entities."""

    event_type: ClassVar[str] = ""

    application: str = ""
    dialog: str = ""
    node: str = ""
    timestamp: Optional[datetime] = None
    type: str = ""

    def __post_init__(self) -> None:
        if not self.type:
            self.type = self.event_type

    def key(self, kind: str, id: str) -> Key:
        """A key of the given kind and id at this event's location."""
        return Key(kind=kind, id=id, node=self.node, dialog=self.dialog, app=self.application)

    def keys(self) -> Keys:
        """The keys of the entities this event relates to."""
        return Keys()

    def set_dialog(self, id: str) -> None:
        """Tag the event with a dialog, replacing any existing one."""
        self.dialog = id

    def _bridge_keys(self, bridge: BridgeData) -> list[Key]:
        return [self.key(BRIDGE_KEY, bridge.id)] + [
            self.key(CHANNEL_KEY, cid) for cid in bridge.channel_ids
        ]

    def _endpoint_key(self, endpoint: EndpointData) -> Key:
        return self.key(ENDPOINT_KEY, endpoint_id(endpoint.technology, endpoint.resource))

    def _present(self, kind: str, *ids: str) -> list[Key]:
        return [self.key(kind, i) for i in ids if i]


@dataclass
class _ChannelEvent(EventData):
    channel: ChannelData = field(default_factory=ChannelData)

    def keys(self) -> Keys:
        return Keys([self.key(CHANNEL_KEY, self.channel.id)])


@dataclass
class ApplicationMoveFailed(EventData):
    event_type: ClassVar[str] = EventTypes.APPLICATION_MOVE_FAILED
    channel: ChannelData = field(default_factory=ChannelData)
    destination: str = ""
    args: list[str] = field(default_factory=list)

    def keys(self) -> Keys:
        return Keys(self._present(CHANNEL_KEY, self.channel.id))


@dataclass
class ApplicationReplaced(EventData):
    event_type: ClassVar[str] = EventTypes.APPLICATION_REPLACED


@dataclass
class BridgeAttendedTransfer(EventData):
    event_type: ClassVar[str] = EventTypes.BRIDGE_ATTENDED_TRANSFER
    destination_application: str = ""
    destination_bridge: str = ""
    destination_type: str = ""
    is_external: bool = False
    result: str = ""
    destination_threeway_bridge: BridgeData = field(default_factory=BridgeData)
    transferer_first_leg_bridge: BridgeData = field(default_factory=BridgeData)
    transferer_second_leg_bridge: BridgeData = field(default_factory=BridgeData)
    destination_link_first_leg: ChannelData = field(default_factory=ChannelData)
    destination_link_second_leg: ChannelData = field(default_factory=ChannelData)
    destination_threeway_channel: ChannelData = field(default_factory=ChannelData)
    replace_channel: ChannelData = field(default_factory=ChannelData)
    transferee: ChannelData = field(default_factory=ChannelData)
    transferer_first_leg: ChannelData = field(default_factory=ChannelData)
    transferer_second_leg: ChannelData = field(default_factory=ChannelData)
    transfer_target: ChannelData = field(default_factory=ChannelData)

    def keys(self) -> Keys:
        bridges = self._present(
            BRIDGE_KEY,
            self.destination_threeway_bridge.id,
            self.transferer_first_leg_bridge.id,
            self.transferer_second_leg_bridge.id,
        )
        channels = self._present(
            CHANNEL_KEY,
            self.destination_link_first_leg.id,
            self.destination_link_second_leg.id,
            self.destination_threeway_channel.id,
            self.replace_channel.id,
            self.transferee.id,
            self.transferer_first_leg.id,
            self.transferer_second_leg.id,
            self.transfer_target.id,
        )
        return Keys(bridges + channels)


@dataclass
class BridgeBlindTransfer(EventData):
    event_type: ClassVar[str] = EventTypes.BRIDGE_BLIND_TRANSFER
    bridge: BridgeData = field(default_factory=BridgeData)
    channel: ChannelData = field(default_factory=ChannelData)
    replace_channel: ChannelData = field(default_factory=ChannelData)
    transferee: ChannelData = field(default_factory=ChannelData)
    context: str = ""
    exten: str = ""
    is_external: bool = False
    result: str = ""

    def keys(self) -> Keys:
        return Keys(
            self._bridge_keys(self.bridge)
            + [self.key(CHANNEL_KEY, self.channel.id)]
            + self._present(CHANNEL_KEY, self.replace_channel.id, self.transferee.id)
        )


@dataclass
class BridgeCreated(EventData):
    event_type: ClassVar[str] = EventTypes.BRIDGE_CREATED
    bridge: BridgeData = field(default_factory=BridgeData)

    def keys(self) -> Keys:
        # The member channels are listed twice, as the wire protocol's
        # consumers have always seen them.
        return Keys(
            self._bridge_keys(self.bridge)
            + [self.key(CHANNEL_KEY, cid) for cid in self.bridge.channel_ids]
        )


@dataclass
class BridgeDestroyed(EventData):
    event_type: ClassVar[str] = EventTypes.BRIDGE_DESTROYED
    bridge: BridgeData = field(default_factory=BridgeData)

    def keys(self) -> Keys:
        return Keys(self._bridge_keys(self.bridge))


@dataclass
class BridgeMerged(EventData):
    event_type: ClassVar[str] = EventTypes.BRIDGE_MERGED
    bridge: BridgeData = field(default_factory=BridgeData)
    bridge_from: BridgeData = field(default_factory=BridgeData)

    def keys(self) -> Keys:
        return Keys(self._bridge_keys(self.bridge) + self._bridge_keys(self.bridge_from))


@dataclass
class BridgeVideoSourceChanged(EventData):
    event_type: ClassVar[str] = EventTypes.BRIDGE_VIDEO_SOURCE_CHANGED
    bridge: BridgeData = field(default_factory=BridgeData)
    old_video_source_id: str = ""

    def keys(self) -> Keys:
        return Keys(self._bridge_keys(self.bridge))


@dataclass
class ChannelCallerID(_ChannelEvent):
    event_type: ClassVar[str] = EventTypes.CHANNEL_CALLER_ID
    caller_presentation: int = 0
    caller_presentation_txt: str = ""


@dataclass
class ChannelConnectedLine(_ChannelEvent):
    event_type: ClassVar[str] = EventTypes.CHANNEL_CONNECTED_LINE


@dataclass
class ChannelCreated(_ChannelEvent):
    event_type: ClassVar[str] = EventTypes.CHANNEL_CREATED


@dataclass
class ChannelDestroyed(_ChannelEvent):
    event_type: ClassVar[str] = EventTypes.CHANNEL_DESTROYED
    cause: int = 0
    cause_txt: str = ""


@dataclass
class ChannelDialplan(_ChannelEvent):
    event_type: ClassVar[str] = EventTypes.CHANNEL_DIALPLAN
    dialplan_app: str = ""
    dialplan_app_data: str = ""


@dataclass
class ChannelDtmfReceived(_ChannelEvent):
    event_type: ClassVar[str] = EventTypes.CHANNEL_DTMF_RECEIVED
    digit: str = ""
    duration_ms: int = 0


@dataclass
class ChannelEnteredBridge(EventData):
    event_type: ClassVar[str] = EventTypes.CHANNEL_ENTERED_BRIDGE
    bridge: BridgeData = field(default_factory=BridgeData)
    channel: ChannelData = field(default_factory=ChannelData)

    def keys(self) -> Keys:
        return Keys([self.key(CHANNEL_KEY, self.channel.id)] + self._bridge_keys(self.bridge))


@dataclass
class ChannelHangupRequest(_ChannelEvent):
    event_type: ClassVar[str] = EventTypes.CHANNEL_HANGUP_REQUEST
    cause: int = 0
    soft: bool = False


@dataclass
class ChannelHold(_ChannelEvent):
    event_type: ClassVar[str] = EventTypes.CHANNEL_HOLD
    musicclass: str = ""


@dataclass
class ChannelLeftBridge(EventData):
    event_type: ClassVar[str] = EventTypes.CHANNEL_LEFT_BRIDGE
    bridge: BridgeData = field(default_factory=BridgeData)
    channel: ChannelData = field(default_factory=ChannelData)

    def keys(self) -> Keys:
        return Keys([self.key(CHANNEL_KEY, self.channel.id)] + self._bridge_keys(self.bridge))


@dataclass
class ChannelStateChange(_ChannelEvent):
    event_type: ClassVar[str] = EventTypes.CHANNEL_STATE_CHANGE


@dataclass
class ChannelTalkingFinished(_ChannelEvent):
    event_type: ClassVar[str] = EventTypes.CHANNEL_TALKING_FINISHED
    duration: int = 0


@dataclass
class ChannelTalkingStarted(_ChannelEvent):
    event_type: ClassVar[str] = EventTypes.CHANNEL_TALKING_STARTED


@dataclass
class ChannelUnhold(_ChannelEvent):
    event_type: ClassVar[str] = EventTypes.CHANNEL_UNHOLD


@dataclass
class ChannelUserevent(EventData):
    event_type: ClassVar[str] = EventTypes.CHANNEL_USEREVENT
    bridge: BridgeData = field(default_factory=BridgeData)
    channel: ChannelData = field(default_factory=ChannelData)
    endpoint: EndpointData = field(default_factory=EndpointData)
    eventname: str = ""
    userevent: Any = None

    def keys(self) -> Keys:
        return Keys(
            [self.key(CHANNEL_KEY, self.channel.id)]
            + self._bridge_keys(self.bridge)
            + [self._endpoint_key(self.endpoint)]
            + [self.key(CHANNEL_KEY, cid) for cid in self.endpoint.channel_ids]
        )


@dataclass
class ChannelVarset(_ChannelEvent):
    event_type: ClassVar[str] = EventTypes.CHANNEL_VARSET
    value: str = ""
    variable: str = ""


@dataclass
class ContactInfo(EventData):
    event_type: ClassVar[str] = EventTypes.CONTACT_INFO
    aor: str = ""
    contact_status: str = ""
    roundtrip_usec: str = ""
    uri: str = ""


@dataclass
class ContactStatusChange(EventData):
    event_type: ClassVar[str] = EventTypes.CONTACT_STATUS_CHANGE
    contact_info: ContactInfo = field(default_factory=ContactInfo)
    endpoint: EndpointData = field(default_factory=EndpointData)

    def keys(self) -> Keys:
        return Keys([self._endpoint_key(self.endpoint)])


@dataclass
class DeviceStateChanged(EventData):
    event_type: ClassVar[str] = EventTypes.DEVICE_STATE_CHANGED
    device_state: DeviceStateData = field(default_factory=DeviceStateData)

    def keys(self) -> Keys:
        return Keys([self.key(DEVICE_STATE_KEY, self.device_state.name)])


@dataclass
class Dial(EventData):
    event_type: ClassVar[str] = EventTypes.DIAL
    caller: ChannelData = field(default_factory=ChannelData)
    dialstatus: str = ""
    dialstring: str = ""
    forward: str = ""
    forwarded: ChannelData = field(default_factory=ChannelData)
    peer: ChannelData = field(default_factory=ChannelData)

    def keys(self) -> Keys:
        return Keys(
            self._present(CHANNEL_KEY, self.caller.id)
            + [self.key(CHANNEL_KEY, self.peer.id)]
            + self._present(CHANNEL_KEY, self.forwarded.id)
        )


@dataclass
class EndpointStateChange(EventData):
    event_type: ClassVar[str] = EventTypes.ENDPOINT_STATE_CHANGE
    endpoint: EndpointData = field(default_factory=EndpointData)

    def keys(self) -> Keys:
        return Keys([self._endpoint_key(self.endpoint)])


@dataclass
class MissingParams(EventData):
    event_type: ClassVar[str] = EventTypes.MISSING_PARAMS
    params: list[str] = field(default_factory=list)


@dataclass
class Peer(EventData):
    event_type: ClassVar[str] = EventTypes.PEER
    address: str = ""
    cause: str = ""
    peer_status: str = ""
    port: str = ""
    time: str = ""


@dataclass
class PeerStatusChange(EventData):
    event_type: ClassVar[str] = EventTypes.PEER_STATUS_CHANGE
    endpoint: EndpointData = field(default_factory=EndpointData)
    peer: Peer = field(default_factory=Peer)

    def keys(self) -> Keys:
        return Keys([self._endpoint_key(self.endpoint)])


@dataclass
class _PlaybackEvent(EventData):
    playback: PlaybackData = field(default_factory=PlaybackData)

    def keys(self) -> Keys:
        return Keys([self.key(PLAYBACK_KEY, self.playback.id)])


@dataclass
class PlaybackContinuing(_PlaybackEvent):
    event_type: ClassVar[str] = EventTypes.PLAYBACK_CONTINUING


@dataclass
class PlaybackFinished(_PlaybackEvent):
    event_type: ClassVar[str] = EventTypes.PLAYBACK_FINISHED


@dataclass
class PlaybackStarted(_PlaybackEvent):
    event_type: ClassVar[str] = EventTypes.PLAYBACK_STARTED


@dataclass
class _RecordingEvent(EventData):
    recording: LiveRecordingData = field(default_factory=LiveRecordingData)

    def keys(self) -> Keys:
        return Keys([self.key(LIVE_RECORDING_KEY, self.recording.name)])


@dataclass
class RecordingFailed(_RecordingEvent):
    event_type: ClassVar[str] = EventTypes.RECORDING_FAILED


@dataclass
class RecordingFinished(_RecordingEvent):
    event_type: ClassVar[str] = EventTypes.RECORDING_FINISHED


@dataclass
class RecordingStarted(_RecordingEvent):
    event_type: ClassVar[str] = EventTypes.RECORDING_STARTED


@dataclass
class StasisEnd(_ChannelEvent):
    event_type: ClassVar[str] = EventTypes.STASIS_END


@dataclass
class StasisStart(EventData):
    event_type: ClassVar[str] = EventTypes.STASIS_START
    args: list[str] = field(default_factory=list)
    channel: ChannelData = field(default_factory=ChannelData)
    replace_channel: ChannelData = field(default_factory=ChannelData)

    def keys(self) -> Keys:
        return Keys(
            [self.key(CHANNEL_KEY, self.channel.id)]
            + self._present(CHANNEL_KEY, self.replace_channel.id)
        )


@dataclass
class TextMessageReceived(EventData):
    event_type: ClassVar[str] = EventTypes.TEXT_MESSAGE_RECEIVED
    endpoint: EndpointData = field(default_factory=EndpointData)
    message: Any = None

    def keys(self) -> Keys:
        return Keys([self._endpoint_key(self.endpoint)])


class Header(dict):
    """Transport metadata: each key maps to a list of values."""

    def add(self, key: str, val: str) -> None:
        """Append a value to the key's list."""
        self.setdefault(key, []).append(val)

    def set(self, key: str, val: str) -> None:
        """Replace the key's values with the single value."""
        self[key] = [val]

    def get(self, key: str) -> str:  # type: ignore[override]
        """The first value of the key, or an empty string."""
        values = dict.get(self, key)
        return values[0] if values else ""

    def delete(self, key: str) -> None:
        """Remove the key's values, if any."""
        self.pop(key, None)