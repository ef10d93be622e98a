from arikit.key import new_key
from arikit.textmessage import TextMessageData, TextMessageVariable


def test_defaults_are_empty():
    msg = TextMessageData()
    assert msg.key is None
    assert msg.body == ""
    assert msg.from_ == ""
    assert msg.to == ""
    assert msg.variables == []


def test_variables_not_shared_between_instances():
    a = TextMessageData()
    b = TextMessageData()
    a.variables.append(TextMessageVariable("k", "v"))
    assert b.variables == []


def test_fields_hold_values():
    key = new_key("endpoint", "PJSIP/alice")
    var = TextMessageVariable(key="k", value="v")
    msg = TextMessageData(key=key, body="hi", from_="pjsip:a", to="pjsip:b", variables=[var])
    assert msg.key.id == "PJSIP/alice"
    assert msg.variables[0].value == "v"
    assert msg == TextMessageData(key=key, body="hi", from_="pjsip:a", to="pjsip:b", variables=[var])


def test_variable_equality():
    assert TextMessageVariable("a", "1") == TextMessageVariable(key="a", value="1")
    assert TextMessageVariable("a", "1") != TextMessageVariable("a", "2")