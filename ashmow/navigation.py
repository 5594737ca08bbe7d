"""Navigation events and the navigation service."""

from __future__ import annotations

from dataclasses import dataclass

from ashmow.context import Service
from ashmow.event_service import EventService
from ashmow.events import Event
from ashmow.geo_pos import GeoPos


@dataclass(frozen=True)
class EvNav(Event):
    """A navigation fix: the mower's geographic position."""

    geo_pos: GeoPos


class NavigationService(Service):
    """Service that will steer the mower from its position fixes."""

    def __init__(self, event_service: EventService) -> None:
        self.event_service = event_service

    @property
    def name(self) -> str:
        return "navigation_service"

    def update(self) -> None:
        """Run one navigation cycle; no steering is driven yet."""