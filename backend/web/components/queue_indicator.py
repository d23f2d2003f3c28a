"""
Position indicator dots for the kiosk slide.
"""

from typing import Sequence

from backend.display.indicator import IndicatorDot

from .base import Component


class QueueIndicator(Component):
    def __init__(self, dots: Sequence[IndicatorDot]) -> None:
        self.dots = list(dots)

    def render(self) -> str:
        if not self.dots:
            return ""
        parts = []
        for dot in self.dots:
            if dot.gap_before:
                parts.append('<span class="queue-indicator__gap" aria-hidden="true">…</span>')
            attrs = self.attributes(
                class_=self.classes("queue-indicator__dot", **{"queue-indicator__dot--active": dot.active}),
                data_index=str(dot.index),
                aria_current="true" if dot.active else None,
            )
            parts.append(f"<span {attrs}></span>")
        return f'<div class="queue-indicator" aria-hidden="true">{"".join(parts)}</div>'
