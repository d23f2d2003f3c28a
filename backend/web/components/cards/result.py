"""
Result cards shown after a submission.
"""

from backend.wall.records import SubmissionRecord

from ..base import Component


class SuccessCard(Component):
    """Confirmation replacing the form after an accepted submission."""

    def __init__(self, record: SubmissionRecord, phrase: str) -> None:
        self.record = record
        self.phrase = phrase

    def render(self) -> str:
        what = "image" if self.record.kind == "image" else "message"
        return (
            '<section id="submit-form" class="card result-card result-card--success" role="status">'
            f'<h2 class="result-card__title">{self.escape(self.phrase)}</h2>'
            f"<p>Thanks {self.escape(self.record.name)}, your {what} is on the wall.</p>"
            '<a class="btn btn-secondary" href="/submit">Send another</a>'
            "</section>"
        )
