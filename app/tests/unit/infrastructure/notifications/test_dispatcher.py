"""Unit tests for NotificationDispatcher and the deliver_first policy."""

import pytest

from infrastructure.notifications.channels.base import NotificationChannel
from infrastructure.notifications.dispatcher import NotificationDispatcher, deliver_first
from infrastructure.notifications.models import DeliveryResult, DeliveryStatus


class StubChannel(NotificationChannel):
    """Channel returning a fixed status and recording calls."""

    def __init__(
        self,
        name,
        status=DeliveryStatus.DELIVERED,
        available=True,
        decline_is_final=False,
        simulated=False,
        error=None,
    ):
        self.name = name
        self.status = status
        self.available = available
        self.decline_is_final = decline_is_final
        self.simulated = simulated
        self.error = error
        self.calls = []

    @property
    def channel_name(self):
        return self.name

    @property
    def is_available(self):
        return self.available

    def deliver(self, recipient_id, message):
        self.calls.append((recipient_id, message))
        if self.error:
            raise self.error
        return DeliveryResult(
            channel=self.name, status=self.status, recipient_id=recipient_id
        )


@pytest.mark.unit
class TestDeliverFirst:
    def test_first_available_channel_delivers(self):
        first = StubChannel("first")
        second = StubChannel("second")

        result = deliver_first([first, second], "U1", "hello")

        assert result.channel == "first"
        assert result.is_delivered is True
        assert second.calls == []

    def test_unavailable_channels_are_skipped(self):
        first = StubChannel("first", available=False)
        second = StubChannel("second")

        result = deliver_first([first, second], "U1", "hello")

        assert result.channel == "second"
        assert first.calls == []

    def test_final_decline_stops_dispatch(self):
        first = StubChannel("first", DeliveryStatus.DECLINED, decline_is_final=True)
        second = StubChannel("second")

        result = deliver_first([first, second], "U1", "hello")

        assert result.status == DeliveryStatus.DECLINED
        assert result.channel == "first"
        assert second.calls == []

    def test_non_final_decline_moves_on(self):
        first = StubChannel("first", DeliveryStatus.DECLINED)
        second = StubChannel("second")

        result = deliver_first([first, second], "U1", "hello")

        assert result.channel == "second"
        assert result.is_delivered is True

    def test_all_declined_returns_last_decline(self):
        first = StubChannel("first", DeliveryStatus.DECLINED)
        second = StubChannel("second", DeliveryStatus.DECLINED)

        result = deliver_first([first, second], "U1", "hello")

        assert result.channel == "second"
        assert result.status == DeliveryStatus.DECLINED

    def test_nothing_available(self):
        result = deliver_first([StubChannel("first", available=False)], "U1", "hello")

        assert result.status == DeliveryStatus.UNAVAILABLE
        assert result.recipient_id == "U1"

    def test_channel_exceptions_propagate(self):
        failing = StubChannel("first", error=ConnectionError("boom"))

        with pytest.raises(ConnectionError):
            deliver_first([failing], "U1", "hello")


@pytest.mark.unit
class TestNotificationDispatcher:
    def test_send_passes_message(self):
        channel = StubChannel("only")
        dispatcher = NotificationDispatcher(channels=[channel])

        result = dispatcher.send("U1", "hello")

        assert result.is_delivered is True
        assert channel.calls == [("U1", "hello")]

    def test_is_configured_ignores_simulated_channels(self):
        dispatcher = NotificationDispatcher(
            channels=[
                StubChannel("dm", available=False),
                StubChannel("demo", simulated=True),
            ]
        )

        assert dispatcher.is_configured() is False

    def test_is_configured_with_real_channel(self):
        dispatcher = NotificationDispatcher(
            channels=[StubChannel("webhook"), StubChannel("demo", simulated=True)]
        )

        assert dispatcher.is_configured() is True

    def test_get_available_channels(self):
        dispatcher = NotificationDispatcher(
            channels=[
                StubChannel("dm", available=False),
                StubChannel("webhook"),
                StubChannel("demo", simulated=True),
            ]
        )

        assert dispatcher.get_available_channels() == ["webhook", "demo"]
