from arikit.originate import OriginateRequest


def test_minimal_request_only_has_endpoint():
    req = OriginateRequest(endpoint="PJSIP/george")
    assert req.to_dict() == {"endpoint": "PJSIP/george"}


def test_endpoint_is_always_present():
    assert OriginateRequest().to_dict() == {"endpoint": ""}


def test_wire_names_for_optional_fields():
    req = OriginateRequest(
        endpoint="Local/party@mycontext",
        timeout=30,
        caller_id="<102>",
        app="demo",
        app_args="a,b",
        channel_id="chan-a",
        other_channel_id="chan-b",
        variables={"FOO": "bar"},
    )
    wire = req.to_dict()
    assert wire["endpoint"] == "Local/party@mycontext"
    assert wire["timeout"] == 30
    assert wire["callerId"] == "<102>"
    assert wire["appArgs"] == "a,b"
    assert wire["channelId"] == "chan-a"
    assert wire["otherChannelId"] == "chan-b"
    assert wire["variables"] == {"FOO": "bar"}
    assert "context" not in wire
    assert "priority" not in wire


def test_negative_timeout_is_kept():
    wire = OriginateRequest(endpoint="PJSIP/george", timeout=-1).to_dict()
    assert wire["timeout"] == -1


def test_variables_are_copied():
    variables = {"A": "1"}
    wire = OriginateRequest(endpoint="PJSIP/george", variables=variables).to_dict()
    wire["variables"]["B"] = "2"
    assert variables == {"A": "1"}


def test_dialplan_location_fields():
    wire = OriginateRequest(
        endpoint="PJSIP/george", context="default", extension="100", priority=1
    ).to_dict()
    assert set(wire) == {"endpoint", "context", "extension", "priority"}