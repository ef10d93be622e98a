# arikit

Building blocks for applications that talk to an Asterisk server through the
Asterisk REST Interface (ARI). The package has no runtime dependencies.

- `arikit.key`: `Key` and `Keys` identify channels, bridges, playbacks,
  recordings and other resources, with wildcard matching on application,
  node, dialog, kind and id.
- `arikit.keyfilter`: functions such as `channels(keys)` and `bridges(keys)`
  that keep the keys of one kind.
- `arikit.events`: typed event classes (`ChannelDtmfReceived`,
  `BridgeCreated`, `PlaybackFinished`, ...), the entity data they carry, the
  `EventTypes` names and a `Header` for transport metadata.
- `arikit.routing`: pull channel, bridge, endpoint, playback and recording ids
  out of an event, and find out which resource an event created or finished.
- `arikit.bus`: an in-process `Bus` that delivers events to subscriptions
  filtered by key and event type, without blocking the sender.
- Resource data and handles: `arikit.playback`, `arikit.recordings`,
  `arikit.resources` (logging channels and sounds), `arikit.mailbox` and
  `arikit.textmessage`.
- `arikit.originate`: `OriginateRequest`, the parameters for creating a
  channel.
- `arikit.audiouri`: build `sound:`, `digits:`, `number:`, `recording:` and
  `tone:` media URIs.
- `arikit.rid`: sortable, time-stamped ids for new resources.

## Installation

```
pip install arikit
```

## Keys

```python
from arikit.key import Keys, app_key, kind_key, new_key

# Empty fields act as wildcards.
assert app_key("app").match(new_key("", ""))
assert not app_key("app").match(app_key("app2"))
assert new_key("application", "").match(new_key("application", "id1"))

keys = Keys([
    new_key("application", "app1"),
    new_key("channel", "ch1"),
    new_key("bridge", "br1"),
])
channels_and_bridges = keys.filter(kind_key("channel"), kind_key("bridge"))
everything_else = keys.without(kind_key("application"))
ch1 = keys.id("ch1")
```

## Events and routing

```python
from arikit.events import ChannelData, ChannelDtmfReceived
from arikit.routing import channel_ids

event = ChannelDtmfReceived(
    application="demo", channel=ChannelData(id="ch1"), digit="5"
)
event.type            # "ChannelDtmfReceived"
event.keys()          # [Key(kind="channel", id="ch1", app="demo")]
channel_ids(event)    # ["ch1"]
```

`routing.created(event)` returns `(created_id, related_id)` for events that
create a resource (`BridgeCreated`, `ChannelEnteredBridge`,
`PlaybackStarted`) and `routing.destroyed(event)` the id of the resource an
event finished; both return `None` for other events.

## Event bus

```python
from arikit.bus import Bus
from arikit.events import EventTypes

bus = Bus()
subscription = bus.subscribe(None, EventTypes.CHANNEL_DTMF_RECEIVED)

bus.send(event)
received = subscription.get(0.1)    # waits up to 0.1 s; raises TimeoutError if nothing came

subscription.cancel()
bus.close()
```

A subscription whose key is `None` matches every event; otherwise the event
is delivered when any of its keys matches the subscription's key. The event
reaches the subscription once however many of its keys match. Each
subscription buffers up to 100 events and drops further ones. After
`cancel()`, `get()` returns `None` once the buffer is drained; iterating a
subscription yields events until then, and it can be used as a context
manager that cancels on exit.

## Resource handles

Handles wrap a key and a backend object you supply that performs the
operations (for example, an object with `data`, `control`, `stop` and
`subscribe` methods for playbacks):

```python
from arikit.key import new_key, PLAYBACK_KEY
from arikit.playback import PlaybackHandle

handle = PlaybackHandle(new_key(PLAYBACK_KEY, "pb1"), backend, exec=start_playback)
handle.exec()      # runs start_playback(handle) once; later calls do nothing
handle.control("pause")
handle.stop()
```

`LiveRecordingHandle`, `StoredRecordingHandle`, `LogHandle` and
`MailboxHandle` work the same way over their own backends.

## Media URIs

```python
from arikit.audiouri import check, digits_uri, number_uri, tone_uri

number_uri(42)                # "number:42"
digits_uri("12#34", "pound")  # ["digits:12", "sound:char/pound", "digits:34"]
tone_uri("busy")              # "tone:busy"
check("sound:tt-monkeys")     # raises ValueError when the URI is not prefix:value
```

`date_time_uri`, `duration_uri` and `wait_uri` speak a date and time, a
duration and a period of silence.

## Resource ids

```python
from arikit import rid

playback_id = rid.new(rid.PLAYBACK)   # lower-case id ending in "-pb"
created_at = rid.timestamp(playback_id)
```

## What the package does not do

- It does not connect to Asterisk: there is no HTTP or WebSocket client, and
  events are built from Python values rather than decoded from the wire. The
  backends behind the handles are yours to provide.
- It does not run playback sequences or collect DTMF input for prompts; the
  `arikit.play` package holds no modules yet.
- It has no handle for the server's loadable modules.