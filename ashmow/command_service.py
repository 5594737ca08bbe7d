"""Service that gathers commands from providers and acts on them."""

from __future__ import annotations

from typing import List

from ashmow.commands import (
    Command,
    CommandHandler,
    CommandProvider,
    CutterCommand,
    MoveCommand,
    PanicCommand,
)
from ashmow.context import Service
from ashmow.event_service import EventService


class JoystickCommandProvider(CommandProvider):
    """Produces the commands of a gamepad: a panic stop and a cutter speed."""

    def update(self) -> List[Command]:
        return [PanicCommand(), CutterCommand(45.0)]


class CommandService(Service, CommandHandler):
    """Polls its command provider each cycle and handles what it returns."""

    def __init__(
        self, event_service: EventService, joystick_command_provider: CommandProvider
    ) -> None:
        self.event_service = event_service
        self.joystick_command_provider = joystick_command_provider

    @property
    def name(self) -> str:
        return "command_service"

    def update(self) -> None:
        for command in self.joystick_command_provider.update():
            command.accept(self)

    def handle_cutter(self, command: CutterCommand) -> None:
        """Take a cutter command; no cutter is driven yet."""

    def handle_move(self, command: MoveCommand) -> None:
        """Take a move command; no motion is driven yet."""

    def handle_panic(self, command: PanicCommand) -> None:
        """Take a panic command; no halt is driven yet."""