from esper import World

from rollcount.events.bus import (
    EventBus,
    EVENT_COUNTER_PLAN_FAILED,
    EVENT_COUNTER_PLAN_READY,
)
from rollcount.rendering.context import RenderContext, build_render_context
from rollcount.rendering.counter_renderer import CounterRenderer


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_COUNTER_PLAN_FAILED, self.on_plan_failed)
        self.event_bus.subscribe(EVENT_COUNTER_PLAN_READY, self.on_plan_ready)
        self._failures: dict[int, str] = {}
        self._render_ctx: RenderContext | None = None
        self._counter_renderer = CounterRenderer(world)

    def on_plan_failed(self, sender, **kwargs):
        entity = kwargs.get('entity')
        if entity is not None:
            self._failures[entity] = kwargs.get('reason', 'failed')

    def on_plan_ready(self, sender, **kwargs):
        self._failures.pop(kwargs.get('entity'), None)

    @property
    def counter_renderer(self) -> CounterRenderer:
        return self._counter_renderer

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        # Without an active Arcade window (unit tests) only the layout cache is built.
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        ctx = build_render_context(
            self.world,
            self.window.width,
            self.window.height,
            failures=self._failures,
        )
        self._render_ctx = ctx
        self._counter_renderer.render(arcade, ctx, headless=headless)
