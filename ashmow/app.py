"""The mower application: command-line arguments, assembly from a config file, and main."""

from __future__ import annotations

import sys
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from os import PathLike
from typing import Dict, List, Optional, Sequence, Union

from ashmow.builders import (
    CommandServiceBuilder,
    DummyGnssBuilder,
    EventSenderServiceBuilder,
    NavigationServiceBuilder,
    RouteServiceBuilder,
    SensorBuilder,
    ServiceBuilder,
    SimulatorServiceBuilder,
    UbloxZedF9rBuilder,
)
from ashmow.context import DEFAULT_PERIOD, Context, ContextRegistry, Updatable
from ashmow.event_service import EventService
from ashmow.sensors import Sensor
from ashmow.timer_service import TimerService

DEFAULT_CONFIG_FILE = "ash_config.xml"
EVENT_SERVICE_CONTEXT = "EVENT_SERVICE_CONTEXT"
TIMER_SERVICE_CONTEXT = "TIMER_SERVICE_CONTEXT"


@dataclass(frozen=True)
class Arguments:
    """Command-line settings."""

    config_file: str = DEFAULT_CONFIG_FILE
    debug: bool = False


def parse_arguments(argv: Sequence[str]) -> Arguments:
    """Read ``-c <config file>`` and ``-d`` (debug); other arguments are ignored.

    ``argv`` holds the arguments without the program name.
    """
    config_file = DEFAULT_CONFIG_FILE
    debug = False
    args = iter(argv)
    for arg in args:
        if arg == "-c":
            try:
                config_file = next(args)
            except StopIteration:
                raise ValueError("option -c needs a config file") from None
        elif arg == "-d":
            debug = True
    return Arguments(config_file=config_file, debug=debug)


def _close_if_possible(obj: object) -> None:
    closer = getattr(obj, "close", None)
    if callable(closer):
        closer()


class Ash:
    """The running application: its contexts and its sensors."""

    def __init__(
        self,
        context_registry: ContextRegistry,
        sensors: Sequence[Sensor],
        close_timeout: Optional[float] = None,
    ) -> None:
        self.context_registry = context_registry
        self.sensors: List[Sensor] = list(sensors)
        self.close_timeout = close_timeout

    def start(self) -> None:
        """Start every context."""
        self.context_registry.start()

    def stop(self) -> None:
        """Ask every context to stop."""
        self.context_registry.stop()

    def close(self) -> None:
        """Stop and join every context, then release services and sensors."""
        self.context_registry.close(self.close_timeout)
        for context in reversed(list(self.context_registry.contexts.values())):
            for updatable in reversed(context.updatables):
                _close_if_possible(updatable)
        for sensor in self.sensors:
            _close_if_possible(sensor)

    def __enter__(self) -> Ash:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class AshBuilder:
    """Assembles an Ash from command-line arguments and the config file they name."""

    def __init__(
        self, argv: Optional[Sequence[str]] = None, context_period: float = DEFAULT_PERIOD
    ) -> None:
        self.arguments = parse_arguments(sys.argv[1:] if argv is None else argv)
        self.context_registry = ContextRegistry(context_period)
        self.event_service = EventService()
        self.timer_service = TimerService()
        self.sensors: List[Sensor] = []

        sensor_builders: List[SensorBuilder] = [DummyGnssBuilder(), UbloxZedF9rBuilder()]
        self.sensor_builders: Dict[str, SensorBuilder] = {
            builder.sensor_name: builder for builder in sensor_builders
        }
        service_builders: List[ServiceBuilder] = [
            CommandServiceBuilder(self.event_service),
            EventSenderServiceBuilder(self.event_service, self.timer_service),
            NavigationServiceBuilder(self.event_service),
            RouteServiceBuilder(self.event_service),
            SimulatorServiceBuilder(self.event_service),
        ]
        self.service_builders: Dict[str, ServiceBuilder] = {
            builder.service_name: builder for builder in service_builders
        }

    def build(self) -> Ash:
        """Register the core services, build what the config file names, return the app."""
        self.create_context(self.event_service, EVENT_SERVICE_CONTEXT)
        self.create_context(self.timer_service, TIMER_SERVICE_CONTEXT)
        self.build_config(self.arguments.config_file)
        return Ash(self.context_registry, self.sensors)

    def create_context(self, updatable: Updatable, context_name: str) -> Context:
        """Put the updatable in the named context, creating the context if needed."""
        context = self.context_registry.register_context(context_name)
        context.add_updatable(updatable)
        return context

    def build_config(self, path: Union[str, "PathLike[str]"]) -> None:
        """Build the sensors and services listed in the config file.

        An entry whose builder is unknown or whose parameters are missing is
        reported and skipped.
        """
        try:
            root = ET.parse(path).getroot()
        except (OSError, ET.ParseError) as exc:
            print(f"Could not load config file {path}: {exc}")
            return
        if root.tag != "config":
            return

        sensors_node = root.find("sensors")
        if sensors_node is not None:
            for entry in sensors_node:
                params = self._parameters(entry)
                name = params.get("name", "")
                try:
                    sensor = self.sensor_builders[name].build(params, self.context_registry)
                except KeyError as exc:
                    print(f"Exception when building sensor: {name}.")
                    print(f"Exception: {exc}")
                    continue
                self.sensors.append(sensor)

        services_node = root.find("services")
        if services_node is not None:
            for entry in services_node:
                params = self._parameters(entry)
                name = params.get("name", "")
                try:
                    service = self.service_builders[name].build(params)
                except KeyError as exc:
                    print(f"Exception when building service: {name}.")
                    print(f"Exception: {exc}")
                    continue
                self.create_context(service, name)

    @staticmethod
    def _parameters(entry: ET.Element) -> Dict[str, str]:
        return {param.tag: (param.text or "").strip() for param in entry}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build and start the app, run until a line is read from stdin, then stop."""
    try:
        builder = AshBuilder(argv)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    app = builder.build()
    app.start()
    print("\nPress any key to quit...", flush=True)
    sys.stdin.readline()
    app.stop()
    app.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())