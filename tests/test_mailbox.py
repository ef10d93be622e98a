import pytest

from arikit.key import MAILBOX_KEY, new_key
from arikit.mailbox import MailboxData, MailboxHandle


class FakeMailbox:
    def __init__(self):
        self.boxes = {}

    def data(self, key):
        if key.id not in self.boxes:
            raise LookupError(key.id)
        old, new = self.boxes[key.id]
        return MailboxData(key=key, name=key.id, old_messages=old, new_messages=new)

    def update(self, key, old_messages, new_messages):
        self.boxes[key.id] = (old_messages, new_messages)

    def delete(self, key):
        del self.boxes[key.id]


@pytest.fixture
def handle():
    return MailboxHandle(new_key(MAILBOX_KEY, "100@default"), FakeMailbox())


def test_id_and_key(handle):
    assert handle.id == "100@default"
    assert handle.key.kind == MAILBOX_KEY


def test_update_then_data_round_trip(handle):
    handle.update(3, 5)
    data = handle.data()
    assert data.old_messages == 3
    assert data.new_messages == 5
    assert data.key == handle.key
    assert data.name == handle.id


def test_delete_removes(handle):
    handle.update(0, 1)
    handle.delete()
    with pytest.raises(LookupError):
        handle.data()


def test_data_defaults():
    data = MailboxData()
    assert (data.key, data.name, data.new_messages, data.old_messages) == (None, "", 0, 0)