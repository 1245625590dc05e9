"""
Commands - Notification Handlers

🎯 Stateless Use Cases:
A command is built fresh for every notification it handles and thrown away
afterwards.

- SimpleCommand: override ``execute``
- MacroCommand: override ``initialize_macro_command`` and add sub-command
  factories; they run first in, first out on the same notification
"""

from typing import List, TYPE_CHECKING

from ..interfaces import CommandFactory, CommandInterface
from .notifier import Notifier

if TYPE_CHECKING:
    from ..observer.notification import Notification


class SimpleCommand(Notifier, CommandInterface):
    """Base command; subclasses put their business logic in ``execute``"""

    def execute(self, notification: "Notification"):
        pass


class MacroCommand(Notifier, CommandInterface):
    """
    Command that runs a list of sub-commands in order.

    Subclasses should not override ``execute``. Register the sub-commands
    in ``initialize_macro_command`` instead:

        class StartupCommand(MacroCommand):
            def initialize_macro_command(self):
                self.add_sub_command(PrepareModelCommand)
                self.add_sub_command(PrepareViewCommand)
    """

    def __init__(self):
        super().__init__()
        self._sub_commands: List[CommandFactory] = []
        self.initialize_macro_command()

    def initialize_macro_command(self):
        pass

    def add_sub_command(self, command_factory: CommandFactory):
        self._sub_commands.append(command_factory)

    def execute(self, notification: "Notification"):
        """Build and execute each sub-command, then clear the list"""
        sub_commands = list(self._sub_commands)
        for command_factory in sub_commands:
            command = command_factory()
            if self._multiton_key is not None and hasattr(command, "initialize_notifier"):
                command.initialize_notifier(self._multiton_key)
            command.execute(notification)

        self._sub_commands.clear()


__all__ = ["SimpleCommand", "MacroCommand"]
