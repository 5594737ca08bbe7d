import pytest

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
from ashmow.command_service import CommandService, JoystickCommandProvider
from ashmow.context import ContextRegistry
from ashmow.event_sender import EventSenderService
from ashmow.event_service import EventService
from ashmow.navigation import NavigationService
from ashmow.route_service import EvRequestGridRoute, RouteService
from ashmow.sensors import DummyGnss, UbloxZedF9r
from ashmow.simulator import SimulatorService
from ashmow.timer_service import TimerService


def test_sensor_builder_names():
    assert DummyGnssBuilder().sensor_name == "dummy_gnss"
    assert UbloxZedF9rBuilder().sensor_name == "ublox_zed_f9r"


def test_service_builder_names():
    events = EventService()
    timers = TimerService()
    builders = [
        CommandServiceBuilder(events),
        EventSenderServiceBuilder(events, timers),
        NavigationServiceBuilder(events),
        RouteServiceBuilder(events),
        SimulatorServiceBuilder(events),
    ]
    assert [b.service_name for b in builders] == [
        "command_service",
        "event_sender_service",
        "navigation_service",
        "route_service",
        "simulator_service",
    ]


def test_builders_are_abstract():
    with pytest.raises(TypeError):
        SensorBuilder()
    with pytest.raises(TypeError):
        ServiceBuilder()


def test_dummy_gnss_builder():
    sensor = DummyGnssBuilder().build({}, ContextRegistry())
    assert isinstance(sensor, DummyGnss)
    assert sensor.name == "dummy_gnss"
    assert (sensor.lat, sensor.lng) == (15.0, 60.0)


def test_ublox_builder_missing_device():
    with pytest.raises(KeyError):
        UbloxZedF9rBuilder().build({"context": "gnss"}, ContextRegistry())


def test_ublox_builder_missing_context():
    with pytest.raises(KeyError):
        UbloxZedF9rBuilder().build({"device": "/dev/null-gnss"}, ContextRegistry())


def test_ublox_builder_unopenable_device():
    registry = ContextRegistry()
    sensor = UbloxZedF9rBuilder().build(
        {"device": "/nonexistent/gnss-device", "context": "gnss"}, registry
    )
    assert isinstance(sensor, UbloxZedF9r)
    assert sensor.name == "ublox_zed_f9r"
    assert sensor.device_path == "/nonexistent/gnss-device"
    assert not sensor.connected
    assert list(registry.contexts) == ["gnss"]
    assert registry.contexts["gnss"].updatables == ()


def test_command_service_builder(capsys):
    events = EventService()
    service = CommandServiceBuilder(events).build({})
    assert isinstance(service, CommandService)
    assert isinstance(service.joystick_command_provider, JoystickCommandProvider)
    assert service.event_service is events
    assert "command_service_builder" in capsys.readouterr().out


def test_event_sender_service_builder(capsys):
    events = EventService()
    service = EventSenderServiceBuilder(events, TimerService()).build({})
    assert isinstance(service, EventSenderService)
    assert "event_sender_service_builder" in capsys.readouterr().out
    service.update()
    events.update()
    assert "event_consumer ev_a" in capsys.readouterr().out


def test_navigation_service_builder(capsys):
    events = EventService()
    service = NavigationServiceBuilder(events).build({"name": "navigation_service"})
    assert isinstance(service, NavigationService)
    assert service.event_service is events
    assert "navigation_service_builder" in capsys.readouterr().out


def test_route_service_builder(capsys):
    service = RouteServiceBuilder(EventService()).build({})
    assert isinstance(service, RouteService)
    assert service.name == "route_service"
    assert "route_service_builder" in capsys.readouterr().out


def test_simulator_service_builder(capsys):
    events = EventService()
    route = RouteService(events)
    service = SimulatorServiceBuilder(events).build({})
    assert isinstance(service, SimulatorService)
    assert "simulator_service_builder" in capsys.readouterr().out
    events.update()
    assert route.pending


def test_each_build_gives_independent_service():
    events = EventService()
    builder = RouteServiceBuilder(events)
    first = builder.build({})
    second = builder.build({})
    events.dispatch(EvRequestGridRoute())
    events.update()
    assert first.pending and second.pending
    first.update()
    assert not first.pending
    assert second.pending