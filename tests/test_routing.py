import pytest

from arikit.events import (
    BridgeCreated,
    BridgeData,
    BridgeDestroyed,
    BridgeMerged,
    ChannelData,
    ChannelDestroyed,
    ChannelDtmfReceived,
    ChannelEnteredBridge,
    ChannelUserevent,
    Dial,
    EndpointData,
    EndpointStateChange,
    PlaybackFinished,
    PlaybackStarted,
    RecordingFailed,
    RecordingFinished,
    StasisStart,
)
from arikit.key import endpoint_id
from arikit.playback import PlaybackData
from arikit.recordings import LiveRecordingData
from arikit.routing import (
    bridge_ids,
    channel_ids,
    created,
    destroyed,
    endpoint_ids,
    playback_ids,
    recording_ids,
    resolve_target,
)


@pytest.mark.parametrize(
    "typ,uri,expected",
    [
        ("channel", "channel:abc", "abc"),
        ("channel", "channel:abc:def", "abc:def"),
        ("bridge", "channel:abc", ""),
        ("channel", "channel", ""),
        ("channel", "", ""),
    ],
)
def test_resolve_target(typ, uri, expected):
    assert resolve_target(typ, uri) == expected


def test_bridge_created_ids_and_created():
    evt = BridgeCreated(bridge=BridgeData(id="br1", channel_ids=["a", "b"], creator="c"))
    assert channel_ids(evt) == ["a", "b"]
    assert bridge_ids(evt) == ["br1"]
    assert created(evt) == ("br1", "a")


def test_bridge_created_without_channels_uses_creator():
    evt = BridgeCreated(bridge=BridgeData(id="br1", creator="maker"))
    assert created(evt) == ("br1", "maker")


def test_bridge_merged_bridge_ids():
    evt = BridgeMerged(bridge=BridgeData(id="to"), bridge_from=BridgeData(id="from"))
    assert bridge_ids(evt) == ["to", "from"]


def test_bridge_destroyed():
    evt = BridgeDestroyed(bridge=BridgeData(id="br9"))
    assert destroyed(evt) == "br9"
    assert created(evt) is None


def test_single_channel_event():
    evt = ChannelDtmfReceived(channel=ChannelData(id="ch1"), digit="1")
    assert channel_ids(evt) == ["ch1"]
    assert bridge_ids(evt) == []


def test_channel_destroyed_has_no_channel_ids():
    assert channel_ids(ChannelDestroyed(channel=ChannelData(id="ch1"))) == []


def test_channel_entered_bridge():
    evt = ChannelEnteredBridge(channel=ChannelData(id="ch1"), bridge=BridgeData(id="br1"))
    assert created(evt) == ("br1", "ch1")
    assert channel_ids(evt) == ["ch1"]
    assert bridge_ids(evt) == ["br1"]


def test_dial_channel_ids_order_and_skip_empty():
    evt = Dial(caller=ChannelData(id="c"), peer=ChannelData(id="p"))
    assert channel_ids(evt) == ["c", "p"]
    evt = Dial(caller=ChannelData(id="c"), forwarded=ChannelData(id="f"), peer=ChannelData(id="p"))
    assert channel_ids(evt) == ["c", "f", "p"]


def test_stasis_start_with_replace_channel():
    evt = StasisStart(channel=ChannelData(id="x"), replace_channel=ChannelData(id="y"))
    assert channel_ids(evt) == ["x", "y"]
    assert channel_ids(StasisStart(channel=ChannelData(id="x"))) == ["x"]


def test_endpoint_events():
    ep = EndpointData(technology="PJSIP", resource="alice", channel_ids=["c1", "c2"])
    evt = EndpointStateChange(endpoint=ep)
    assert endpoint_ids(evt) == [endpoint_id("PJSIP", "alice")]
    assert channel_ids(evt) == ["c1", "c2"]


def test_user_event_endpoint_and_bridge():
    evt = ChannelUserevent(
        channel=ChannelData(id="ch"),
        bridge=BridgeData(id="br"),
        endpoint=EndpointData(technology="SIP", resource="bob"),
    )
    assert endpoint_ids(evt) == [endpoint_id("SIP", "bob")]
    assert bridge_ids(evt) == ["br"]


def test_playback_started_channel_target():
    evt = PlaybackStarted(playback=PlaybackData(id="pb1", target_uri="channel:ch1"))
    assert playback_ids(evt) == ["pb1"]
    assert channel_ids(evt) == ["ch1"]
    assert bridge_ids(evt) == []
    assert created(evt) == ("pb1", "ch1")


def test_playback_started_created_without_colon():
    evt = PlaybackStarted(playback=PlaybackData(id="pb1", target_uri="ch1"))
    assert created(evt) == ("pb1", "ch1")


def test_playback_finished_bridge_target():
    evt = PlaybackFinished(playback=PlaybackData(id="pb2", target_uri="bridge:br2"))
    assert bridge_ids(evt) == ["br2"]
    assert channel_ids(evt) == []
    assert destroyed(evt) == "pb2"


def test_recording_events():
    rec = LiveRecordingData(name="rc1", target_uri="channel:ch7")
    failed = RecordingFailed(recording=rec)
    assert recording_ids(failed) == ["rc1"]
    assert channel_ids(failed) == ["ch7"]
    assert destroyed(failed) == "rc1"
    assert destroyed(RecordingFinished(recording=rec)) == "rc1"


def test_unrelated_event_queries_are_empty():
    evt = ChannelDtmfReceived(channel=ChannelData(id="ch1"))
    assert endpoint_ids(evt) == []
    assert playback_ids(evt) == []
    assert recording_ids(evt) == []
    assert destroyed(evt) is None