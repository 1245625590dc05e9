#!/usr/bin/env python3
"""
Counter App - Minimal mvccore Application

Demonstrates the three registries working together:
- CounterProxy holds the count and announces every change
- CounterMediator renders the count whenever it changes
- IncrementCommand / ResetCommand react to user intents
- StartupCommand wires everything up as a MacroCommand
"""

from mvccore import (
    CoreConfig, Environment, Facade, MacroCommand, Mediator, Proxy,
    SimpleCommand, configure_logging
)

STARTUP = "startup"
INCREMENT = "increment"
RESET = "reset"
COUNT_CHANGED = "count_changed"


class CounterProxy(Proxy):
    NAME = "counter"

    def __init__(self):
        super().__init__(data=0)

    def increment(self, amount: int = 1):
        self.data += amount
        self.send_notification(COUNT_CHANGED, self.data)

    def reset(self):
        self.data = 0
        self.send_notification(COUNT_CHANGED, self.data, "reset")


class CounterMediator(Mediator):
    NAME = "counter_view"

    def list_notification_interests(self):
        return [COUNT_CHANGED]

    def handle_notification(self, name, body=None, type=None):
        suffix = " (reset)" if type == "reset" else ""
        self.view_component.append(f"count = {body}{suffix}")


class IncrementCommand(SimpleCommand):

    def execute(self, notification):
        counter = self.facade.retrieve_proxy(CounterProxy.NAME)
        counter.increment(notification.body or 1)


class ResetCommand(SimpleCommand):

    def execute(self, notification):
        self.facade.retrieve_proxy(CounterProxy.NAME).reset()


class PrepareModelCommand(SimpleCommand):

    def execute(self, notification):
        self.facade.register_proxy(CounterProxy())


class PrepareViewCommand(SimpleCommand):

    def execute(self, notification):
        self.facade.register_mediator(CounterMediator(view_component=notification.body))


class StartupCommand(MacroCommand):

    def initialize_macro_command(self):
        self.add_sub_command(PrepareModelCommand)
        self.add_sub_command(PrepareViewCommand)


class CounterFacade(Facade):

    def initialize_controller(self):
        super().initialize_controller()
        self.register_command(STARTUP, StartupCommand)
        self.register_command(INCREMENT, IncrementCommand)
        self.register_command(RESET, ResetCommand)


def main():
    config = CoreConfig.for_environment(Environment.DEVELOPMENT)
    configure_logging(config.logging)

    screen = []
    facade = CounterFacade.get_instance("counter-app", config)
    try:
        facade.send_notification(STARTUP, screen)
        facade.send_notification(INCREMENT)
        facade.send_notification(INCREMENT, 5)
        facade.send_notification(RESET)

        for line in screen:
            print(line)
        print(facade.metrics.get_summary())
    finally:
        Facade.remove_core("counter-app")


if __name__ == "__main__":
    main()
