"""Announcer service.

Pushes short status messages ("Application submitted", "Status updated to
accepted") to whatever live region is listening. Messages travel over the
event bus as Announced events; the announcer keeps the last one so a late
listener can render it.

Usage:
    announcer = Announcer(event_bus=get_event_bus())
    unsubscribe = announcer.subscribe(live_region.render)
    announcer.say("Draft saved")
    ...
    announcer.close()
"""

from collections.abc import Callable

from src.domain.events import Announced
from src.domain.protocols.event_bus_protocol import EventBusProtocol, Unsubscribe


class Announcer:
    """Constructed publish/subscribe object for announcements.

    Has an explicit lifetime: close() drops every listener registered
    through it and further say() calls still publish but reach only
    listeners registered elsewhere.
    """

    def __init__(self, event_bus: EventBusProtocol) -> None:
        self._event_bus = event_bus
        self._last_message = ""
        self._unsubscribers: list[Unsubscribe] = [
            event_bus.subscribe(Announced, self._remember),
        ]

    @property
    def last_message(self) -> str:
        """Most recent message seen on the bus ("" if none)."""
        return self._last_message

    def say(self, message: str) -> None:
        """Publish a message to every current listener."""
        self._event_bus.publish(Announced(message=message))

    def subscribe(self, listener: Callable[[str], None]) -> Unsubscribe:
        """Register a listener receiving the message text.

        Returns:
            Callable removing the listener.
        """

        def deliver(event: Announced) -> None:
            listener(event.message)

        unsubscribe = self._event_bus.subscribe(Announced, deliver)
        self._unsubscribers.append(unsubscribe)
        return unsubscribe

    def close(self) -> None:
        """Unregister every listener added through this announcer."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()

    def _remember(self, event: Announced) -> None:
        self._last_message = event.message
