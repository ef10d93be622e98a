import threading
from datetime import timedelta

import pytest

from arikit.key import LIVE_RECORDING_KEY, STORED_RECORDING_KEY, new_key
from arikit.recordings import (
    LiveRecordingData,
    LiveRecordingHandle,
    Recording,
    RecordingOptions,
    StoredRecordingData,
    StoredRecordingHandle,
)


class FakeStored:
    def __init__(self):
        self.calls = []

    def data(self, key):
        self.calls.append(("data", key))
        return StoredRecordingData(key=key, format="wav", name=key.id)

    def copy(self, key, dest):
        self.calls.append(("copy", key, dest))
        return StoredRecordingHandle(key.new(STORED_RECORDING_KEY, dest), self)

    def delete(self, key):
        self.calls.append(("delete", key))


class FakeLive:
    def __init__(self, stored_backend):
        self.calls = []
        self.stored_backend = stored_backend

    def data(self, key):
        self.calls.append(("data", key))
        return LiveRecordingData(key=key, name=key.id, state="recording")

    def _record(name):
        def method(self, key):
            self.calls.append((name, key))

        return method

    stop = _record("stop")
    pause = _record("pause")
    resume = _record("resume")
    mute = _record("mute")
    unmute = _record("unmute")
    scrap = _record("scrap")

    def stored(self, key):
        self.calls.append(("stored", key))
        return StoredRecordingHandle(key.new(STORED_RECORDING_KEY, key.id), self.stored_backend)

    def subscribe(self, key, *event_types):
        self.calls.append(("subscribe", key, event_types))
        return event_types


@pytest.fixture
def live():
    stored = FakeStored()
    backend = FakeLive(stored)
    key = new_key(LIVE_RECORDING_KEY, "rc1")
    return backend, key


def test_live_data_id_is_name():
    d = LiveRecordingData(name="rc1")
    assert d.id == "rc1"


def test_stored_data_id_is_name():
    d = StoredRecordingData(name="greeting", format="wav")
    assert d.id == "greeting"


def test_live_handle_operations_forward(live):
    backend, key = live
    h = LiveRecordingHandle(key, backend)
    h.stop()
    h.pause()
    h.resume()
    h.mute()
    h.unmute()
    h.scrap()
    assert [c[0] for c in backend.calls] == ["stop", "pause", "resume", "mute", "unmute", "scrap"]
    assert all(c[1] is key for c in backend.calls)


def test_live_handle_id_and_data(live):
    backend, key = live
    h = LiveRecordingHandle(key, backend)
    assert h.id == "rc1"
    assert h.key is key
    assert h.data().name == "rc1"


def test_live_handle_stored(live):
    backend, key = live
    s = LiveRecordingHandle(key, backend).stored()
    assert s.id == "rc1"
    assert s.key.kind == STORED_RECORDING_KEY


def test_live_handle_subscribe(live):
    backend, key = live
    got = LiveRecordingHandle(key, backend).subscribe("RecordingStarted")
    assert got == ("RecordingStarted",)


def test_live_exec_once_across_threads(live):
    backend, key = live
    seen = []
    h = LiveRecordingHandle(key, backend, lambda handle: seen.append(handle))
    threads = [threading.Thread(target=h.exec) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert seen == [h]


def test_live_exec_error_propagates(live):
    backend, key = live

    def failing(handle):
        raise RuntimeError("boom")

    h = LiveRecordingHandle(key, backend, failing)
    with pytest.raises(RuntimeError, match="boom"):
        h.exec()
    h.exec()


def test_stored_handle_copy_and_delete():
    backend = FakeStored()
    key = new_key(STORED_RECORDING_KEY, "rc1")
    h = StoredRecordingHandle(key, backend)
    dest = h.copy("saved")
    assert dest.id == "saved"
    h.delete()
    assert backend.calls == [("copy", key, "saved"), ("delete", key)]


def test_stored_handle_data_and_exec():
    backend = FakeStored()
    key = new_key(STORED_RECORDING_KEY, "rc1")
    seen = []
    h = StoredRecordingHandle(key, backend, lambda handle: seen.append(handle.id))
    h.exec()
    h.exec()
    assert seen == ["rc1"]
    assert h.data().name == "rc1"


def test_recording_options_defaults():
    o = RecordingOptions()
    assert o.max_duration == timedelta(0)
    assert o.beep is False
    assert o.exists == ""


def test_recording_namespace():
    stored = FakeStored()
    live_backend = FakeLive(stored)
    r = Recording(stored=stored, live=live_backend)
    assert r.live.stored_backend is r.stored