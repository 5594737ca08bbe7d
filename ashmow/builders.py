"""Builders that create sensors and services from configuration parameters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Mapping

from ashmow.command_service import CommandService, JoystickCommandProvider
from ashmow.context import ContextRegistry, Service
from ashmow.event_sender import EventSenderService
from ashmow.event_service import EventService
from ashmow.navigation import NavigationService
from ashmow.route_service import RouteService
from ashmow.sensors import DummyGnss, Sensor, UbloxZedF9r
from ashmow.simulator import SimulatorService
from ashmow.timer_service import TimerService


class SensorBuilder(ABC):
    """Creates one kind of sensor, known by its sensor name."""

    sensor_name: ClassVar[str]

    @abstractmethod
    def build(
        self, parameters: Mapping[str, str], context_registry: ContextRegistry
    ) -> Sensor:
        """Create the sensor; a missing parameter raises KeyError."""


class DummyGnssBuilder(SensorBuilder):
    sensor_name = DummyGnss.SENSOR_NAME

    def build(
        self, parameters: Mapping[str, str], context_registry: ContextRegistry
    ) -> Sensor:
        return DummyGnss()


class UbloxZedF9rBuilder(SensorBuilder):
    """Needs the parameters ``device`` and ``context``."""

    sensor_name = UbloxZedF9r.SENSOR_NAME

    def build(
        self, parameters: Mapping[str, str], context_registry: ContextRegistry
    ) -> Sensor:
        device = parameters["device"]
        context = context_registry.register_context(parameters["context"])
        return UbloxZedF9r(device, context)


class ServiceBuilder(ABC):
    """Creates one kind of service, known by its service name."""

    service_name: ClassVar[str]

    @abstractmethod
    def build(self, parameters: Mapping[str, str]) -> Service:
        """Create the service."""


class CommandServiceBuilder(ServiceBuilder):
    service_name = "command_service"

    def __init__(self, event_service: EventService) -> None:
        self.event_service = event_service

    def build(self, parameters: Mapping[str, str]) -> Service:
        print("command_service_builder")
        return CommandService(self.event_service, JoystickCommandProvider())


class EventSenderServiceBuilder(ServiceBuilder):
    service_name = "event_sender_service"

    def __init__(self, event_service: EventService, timer_service: TimerService) -> None:
        self.event_service = event_service
        self.timer_service = timer_service

    def build(self, parameters: Mapping[str, str]) -> Service:
        print("event_sender_service_builder")
        return EventSenderService(self.event_service, self.timer_service)


class NavigationServiceBuilder(ServiceBuilder):
    service_name = "navigation_service"

    def __init__(self, event_service: EventService) -> None:
        self.event_service = event_service

    def build(self, parameters: Mapping[str, str]) -> Service:
        print("navigation_service_builder")
        return NavigationService(self.event_service)


class RouteServiceBuilder(ServiceBuilder):
    service_name = "route_service"

    def __init__(self, event_service: EventService) -> None:
        self.event_service = event_service

    def build(self, parameters: Mapping[str, str]) -> Service:
        print("route_service_builder")
        return RouteService(self.event_service)


class SimulatorServiceBuilder(ServiceBuilder):
    service_name = "simulator_service"

    def __init__(self, event_service: EventService) -> None:
        self.event_service = event_service

    def build(self, parameters: Mapping[str, str]) -> Service:
        print("simulator_service_builder")
        return SimulatorService(self.event_service)