"""
Slide card: one frame of the rotating kiosk display.

The outer <section> carries its own polling attributes so every swap also
updates the `seen` key the next poll sends.
"""

from urllib.parse import urlencode

from backend.display.state import DisplayFrame

from ..base import Component
from ..queue_indicator import QueueIndicator


class SlideCard(Component):
    def __init__(self, frame: DisplayFrame, *, poll_seconds: float = 1.0) -> None:
        self.frame = frame
        self.poll_seconds = poll_seconds

    def _poll_attrs(self) -> str:
        poll = f"{self.poll_seconds:g}s"
        return self.attributes(
            id="display-frame",
            class_=self.classes("slide", **{"slide--empty": self.frame.record is None}),
            hx_get=f"/display/frame?{urlencode({'seen': self.frame.key})}",
            hx_trigger=f"every {poll}",
            hx_swap="outerHTML",
            data_frame_key=self.frame.key,
        )

    def _render_body(self) -> str:
        record = self.frame.record
        if record is None:
            return (
                '<div class="slide__waiting">'
                "<p>Waiting for the first message…</p>"
                "<p class=\"slide__hint\">Scan the QR code to post.</p>"
                "</div>"
            )
        if record.kind == "image":
            img_attrs = self.attributes(
                src=record.content,
                alt=f"Image from {record.name}",
                class_="slide__image",
                loading="eager",
            )
            content_html = f"<img {img_attrs}>"
        else:
            content_html = f'<blockquote class="slide__text">{self.escape(record.content)}</blockquote>'
        return (
            f'<div class="slide__content">{content_html}</div>'
            f'<p class="slide__author">{self.escape(record.name)}</p>'
        )

    def render(self) -> str:
        error_html = (
            f'<div class="slide__error" role="alert">Feed unavailable: {self.escape(self.frame.error)}</div>'
            if self.frame.error
            else ""
        )
        footer_html = ""
        if self.frame.total:
            footer_html = (
                '<footer class="slide__footer">'
                f"{QueueIndicator(self.frame.indicator).render()}"
                f'<span class="slide__count">{self.frame.index + 1} / {self.frame.total}</span>'
                "</footer>"
            )
        return f"<section {self._poll_attrs()}>{error_html}{self._render_body()}{footer_html}</section>"
