import pytest

from arikit import keyfilter
from arikit.key import new_key

KINDS = {
    keyfilter.applications: "application",
    keyfilter.bridges: "bridge",
    keyfilter.channels: "channel",
    keyfilter.device_states: "devicestate",
    keyfilter.endpoints: "endpoint",
    keyfilter.live_recordings: "liverecording",
    keyfilter.loggings: "logging",
    keyfilter.mailboxes: "mailbox",
    keyfilter.modules: "module",
    keyfilter.playbacks: "playback",
    keyfilter.sounds: "sound",
    keyfilter.stored_recordings: "storedrecording",
    keyfilter.variables: "variable",
}


@pytest.fixture
def all_keys():
    keys = []
    for kind in KINDS.values():
        keys.append(new_key(kind, kind + "-1"))
        keys.append(new_key(kind, kind + "-2"))
    return keys


@pytest.mark.parametrize("func, kind", list(KINDS.items()))
def test_each_filter_selects_its_kind(func, kind, all_keys):
    result = func(all_keys)
    assert [k.id for k in result] == [kind + "-1", kind + "-2"]


def test_kind_returns_empty_when_absent(all_keys):
    assert keyfilter.kind("nothing", all_keys) == []


def test_kind_preserves_order_and_identity():
    a = new_key("channel", "a")
    b = new_key("bridge", "b")
    c = new_key("channel", "c")
    result = keyfilter.kind("channel", [a, b, c])
    assert result[0] is a
    assert result[1] is c
    assert len(result) == 2