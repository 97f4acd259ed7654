"""Entry point for the Rollcount counter animation demo.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import logging

from arcade import Window, run, color
from rollcount.world import create_world
from rollcount.events.bus import EventBus, EVENT_KEY_PRESS, EVENT_MOUSE_PRESS, EVENT_TICK
from rollcount.systems.animation import AnimationSystem
from rollcount.systems.counter_system import CounterSystem
from rollcount.systems.input import InputSystem
from rollcount.systems.render import RenderSystem
from rollcount.constants import LOG_LEVEL, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH


class RollcountWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus)
        self.counter_system = CounterSystem(self.world, self.event_bus)
        self.animation_system = AnimationSystem(self.world, self.event_bus)
        self.render_system = RenderSystem(self.world, self.event_bus, self)
        self.input_system = InputSystem(self.world, self.event_bus, self)
        self.background_color = color.BLACK

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, key=symbol, modifiers=modifiers)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)


def main():
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    window = RollcountWindow()
    run()

if __name__ == "__main__":
    main()
