# tests/core/test_event_bus.py

import logging

from rfid_sim.core.event_bus import EventBus


def test_event_bus_publish_subscribe():
    eb = EventBus()
    events = []

    def callback(payload):
        events.append(payload)

    eb.subscribe("test_topic", callback)
    assert eb.publish("test_topic", {"data": 123}) == 1
    assert events == [{"data": 123}]


def test_unsubscribe_stops_delivery():
    eb = EventBus()
    events = []
    eb.subscribe("t", events.append)
    assert eb.unsubscribe("t", events.append)
    assert not eb.unsubscribe("t", events.append)
    assert eb.publish("t", 1) == 0
    assert events == []
    assert eb.topics() == []


def test_failing_subscriber_is_logged_and_skipped(caplog):
    eb = EventBus()
    events = []

    def broken(_):
        raise RuntimeError("boom")

    eb.subscribe("t", broken)
    eb.subscribe("t", events.append)
    with caplog.at_level(logging.ERROR, logger="rfid_sim.core.event_bus"):
        assert eb.publish("t", "msg") == 1
    assert events == ["msg"]
    assert "boom" in caplog.text
