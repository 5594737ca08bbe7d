from ashmow.command_service import CommandService, JoystickCommandProvider
from ashmow.commands import (
    Command,
    CommandProvider,
    CutterCommand,
    PanicCommand,
)
from ashmow.event_service import EventService


class RecordingCommand(Command):
    def __init__(self, log):
        self.log = log

    def accept(self, handler):
        self.log.append(handler)


class ListProvider(CommandProvider):
    def __init__(self, commands):
        self.commands = commands
        self.polls = 0

    def update(self):
        self.polls += 1
        return list(self.commands)


def test_joystick_provider_commands():
    assert JoystickCommandProvider().update() == [PanicCommand(), CutterCommand(45.0)]


def test_joystick_provider_returns_fresh_list_each_poll():
    provider = JoystickCommandProvider()
    first = provider.update()
    first.clear()
    assert len(provider.update()) == 2


def test_service_name():
    service = CommandService(EventService(), JoystickCommandProvider())
    assert service.name == "command_service"


def test_update_passes_every_command_to_service():
    log = []
    provider = ListProvider([RecordingCommand(log), RecordingCommand(log)])
    service = CommandService(EventService(), provider)
    service.update()
    assert provider.polls == 1
    assert log == [service, service]


def test_update_polls_provider_each_cycle():
    provider = ListProvider([])
    service = CommandService(EventService(), provider)
    service.update()
    service.update()
    assert provider.polls == 2


def test_update_with_joystick_commands_leaves_provider_output_intact():
    provider = JoystickCommandProvider()
    service = CommandService(EventService(), provider)
    service.update()
    assert service.joystick_command_provider.update()[1].rpm == 45.0