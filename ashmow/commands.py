"""Commands for the mower and the handlers that act on them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List


class CommandHandler(ABC):
    """Receives commands, one method per command kind."""

    @abstractmethod
    def handle_cutter(self, command: CutterCommand) -> None:
        """Act on a cutter command."""

    @abstractmethod
    def handle_move(self, command: MoveCommand) -> None:
        """Act on a move command."""

    @abstractmethod
    def handle_panic(self, command: PanicCommand) -> None:
        """Act on a panic command."""


class Command(ABC):
    """A command that routes itself to the matching handler method."""

    @abstractmethod
    def accept(self, handler: CommandHandler) -> None:
        """Pass this command to the handler method for its kind."""


@dataclass(frozen=True)
class CutterCommand(Command):
    """Set the cutter speed, in revolutions per minute."""

    rpm: float

    def accept(self, handler: CommandHandler) -> None:
        handler.handle_cutter(self)


@dataclass(frozen=True)
class MoveCommand(Command):
    """Move the mower."""

    def accept(self, handler: CommandHandler) -> None:
        handler.handle_move(self)


@dataclass(frozen=True)
class PanicCommand(Command):
    """Bring the mower to an emergency halt."""

    def accept(self, handler: CommandHandler) -> None:
        handler.handle_panic(self)


class CommandProvider(ABC):
    """A source of commands, polled once per cycle."""

    @abstractmethod
    def update(self) -> List[Command]:
        """Return the commands produced since the last poll."""