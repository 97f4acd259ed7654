from __future__ import annotations

from typing import Any, Dict, Tuple

from esper import World

from rollcount.components.counter_row import CounterRow
from rollcount.constants import (
    CELL_GAP,
    CELL_HEIGHT,
    CELL_MIN_WIDTH,
    CELL_WIDTH,
    COLOR_CELL,
    COLOR_CELL_MOVING,
    COLOR_LABEL,
    COLOR_TEXT,
    FONT_SIZE,
    LABEL_WIDTH,
    ROW_GAP,
    SIDE_MARGIN,
    TOP_MARGIN,
    VALUE_DECIMALS,
)
from rollcount.rendering.context import RenderContext
from rollcount.world import counter_entities

CellKey = Tuple[int, int]  # (row entity, value index)


def format_value(value: Any, integral: bool = False) -> str:
    """Text shown in a cell; integer rows stay integral while rolling."""
    if integral:
        return str(int(round(value)))
    if isinstance(value, float):
        return f"{value:.{VALUE_DECIMALS}f}"
    return str(value)


class CounterRenderer:
    """Draw every counter row as a strip of value cells, top to bottom."""

    def __init__(self, world: World):
        self.world = world
        self.layout_cache: Dict[CellKey, Tuple[float, float, float, float]] = {}
        self.text_cache: Dict[CellKey, str] = {}
        self.moving: set[CellKey] = set()

    def cell_width(self, ctx: RenderContext, columns: int) -> float:
        if columns <= 0:
            return float(CELL_WIDTH)
        available = ctx.window_width - 2 * SIDE_MARGIN - LABEL_WIDTH - CELL_GAP * (columns - 1)
        return float(max(CELL_MIN_WIDTH, min(CELL_WIDTH, available / columns)))

    def render(self, arcade, ctx: RenderContext, headless: bool = False) -> None:
        self.layout_cache.clear()
        self.text_cache.clear()
        self.moving.clear()

        rows: list[tuple[int, CounterRow]] = []
        for ent in counter_entities(self.world):
            rows.append((ent, self.world.component_for_entity(ent, CounterRow)))
        if not rows:
            return
        width = self.cell_width(ctx, max(len(row.values) for _, row in rows))

        for idx, (ent, row) in enumerate(rows):
            top = ctx.window_height - TOP_MARGIN - idx * (CELL_HEIGHT + ROW_GAP)
            bottom = top - CELL_HEIGHT
            integral = all(isinstance(v, int) for v in row.values)

            roll = ctx.roll_by_row.get(ent)
            values = row.values
            moving_span = None
            if roll is not None and not roll.done:
                values = roll.current_values()
                moving_span = roll.plan.steps[roll.step_index].span

            label = row.label
            failure = ctx.failures.get(ent)
            if failure:
                label = f"{label} ({failure})" if label else failure
            if not headless and label:
                arcade.draw_text(
                    label, SIDE_MARGIN, bottom + CELL_HEIGHT / 2, COLOR_LABEL, FONT_SIZE - 2,
                    anchor_x="left", anchor_y="center",
                )

            for i, value in enumerate(values):
                key = (ent, i)
                left = SIDE_MARGIN + LABEL_WIDTH + i * (width + CELL_GAP)
                self.layout_cache[key] = (left, bottom, width, float(CELL_HEIGHT))
                text = format_value(value, integral)
                self.text_cache[key] = text
                is_moving = moving_span is not None and moving_span.contains(i)
                if is_moving:
                    self.moving.add(key)
                if headless:
                    continue
                arcade.draw_lbwh_rectangle_filled(
                    left, bottom, width, CELL_HEIGHT, COLOR_CELL_MOVING if is_moving else COLOR_CELL,
                )
                arcade.draw_text(
                    text, left + width / 2, bottom + CELL_HEIGHT / 2, COLOR_TEXT, FONT_SIZE,
                    anchor_x="center", anchor_y="center",
                )

    def cell_at(self, x: float, y: float) -> CellKey | None:
        for key, (left, bottom, w, h) in self.layout_cache.items():
            if left <= x <= left + w and bottom <= y <= bottom + h:
                return key
        return None
