"""Development service that sends and consumes sample events."""

from __future__ import annotations

from ashmow.context import Service
from ashmow.event_service import EventService
from ashmow.events import Event, EventHandler, handles
from ashmow.timer_service import TimerService


class EvA(Event, uuid="2e1f12dc-2f89-4791-b61d-23a9b17fd3a5"):
    """Sample event sent on every cycle."""


class EvB(Event):
    """Sample event sent on every cycle that nobody consumes."""


class EvT1(Event):
    """Sample timer event, every five seconds."""


class EvT2(Event, uuid="ee4050cc-3b87-4232-ab50-f86c025d7bcd"):
    """Sample timer event, every two seconds."""


class EventConsumer(EventHandler):
    """Prints the EvA and EvT1 events it receives from both services."""

    def __init__(self, event_service: EventService, timer_service: TimerService) -> None:
        self._event_service = event_service
        self._timer_service = timer_service
        event_service.add_event_handler(self)
        timer_service.add_timer_event_handler(self)

    @handles(EvA)
    def on_ev_a(self, event: EvA) -> None:
        print(f"event_consumer ev_a - {event.uuid}")

    @handles(EvT1)
    def on_ev_t1(self, event: EvT1) -> None:
        print(f"event_consumer ev_t1 - {event.uuid}")

    def close(self) -> None:
        self._event_service.remove_event_handler(self)
        self._timer_service.remove_timer_event_handler(self)


class TimerEventConsumer(EventHandler):
    """Schedules cyclic EvT1 and EvT2 events and prints them when they fire."""

    def __init__(self, timer_service: TimerService) -> None:
        self._timer_service = timer_service
        timer_service.add_timer_event_handler(self)
        timer_service.schedule_cyclic_event(EvT1(), 5000)
        timer_service.schedule_cyclic_event(EvT2(), 2000)

    @handles(EvT1)
    def on_ev_t1(self, event: EvT1) -> None:
        print(f"timer_event_consumer ev_t1 - {event.uuid}")

    @handles(EvT2)
    def on_ev_t2(self, event: EvT2) -> None:
        print(f"timer_event_consumer ev_t2 - {event.uuid}")

    def close(self) -> None:
        self._timer_service.remove_timer_event_handler(self)


class EventSenderService(Service):
    """Sends an EvA and an EvB on every cycle, with two sample consumers."""

    def __init__(self, event_service: EventService, timer_service: TimerService) -> None:
        self._event_service = event_service
        self.event_consumer = EventConsumer(event_service, timer_service)
        self.timer_event_consumer = TimerEventConsumer(timer_service)

    @property
    def name(self) -> str:
        return "event_sender_service"

    def update(self) -> None:
        self._event_service.dispatch(EvA())
        self._event_service.dispatch(EvB())

    def close(self) -> None:
        self.event_consumer.close()
        self.timer_event_consumer.close()