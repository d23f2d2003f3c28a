"""
Submission form component.

One form, two content choices: a short text message or a single image. The
length limits live here (`maxlength`); the server only checks the rules that
must never be bypassed, like image size and type.
"""
from typing import Optional

from backend.wall.records import MAX_NAME_LENGTH, MAX_TEXT_LENGTH
from backend.wall.submissions import ALLOWED_IMAGE_TYPES

from ..base import Component
from .fields import FileUploadField, TextAreaField, TextInputField


class SubmissionForm(Component):
    """Render the wall submission form.

    Parameters:
        error: Message shown above the submit button (already user-facing).
        values: Previously entered `name` and `message` to preserve on errors.
        event_title: Heading text.
    """

    def __init__(self, *, error: Optional[str] = None, values: Optional[dict] = None, event_title: str = "") -> None:
        self.error = error
        self.values = values or {}
        self.event_title = event_title

    def render(self) -> str:
        name_html = TextInputField("name", "Your name", required=True).render(
            value=self.values.get("name", ""),
            placeholder="Who are you?",
            maxlength=str(MAX_NAME_LENGTH),
            autocomplete="nickname",
            class_="form-input",
        )
        message_html = TextAreaField(
            "message", "Message", help_text=f"Up to {MAX_TEXT_LENGTH} characters."
        ).render(
            value=self.values.get("message", ""),
            maxlength=str(MAX_TEXT_LENGTH),
            placeholder="Say something nice",
            class_="form-input",
        )
        image_html = FileUploadField(
            "image", "…or an image", help_text="JPEG, PNG, GIF or WebP, max 5MB."
        ).render(accept=",".join(sorted(ALLOWED_IMAGE_TYPES)), class_="form-input")

        error_html = (
            f'<div class="form-error form-error--summary" role="alert">{self.escape(self.error)}</div>'
            if self.error
            else ""
        )
        heading = self.escape(self.event_title) if self.event_title else "Post to the wall"
        form_attrs = self.attributes(
            id="submit-form",
            class_="submit-form card",
            method="post",
            action="/submit",
            enctype="multipart/form-data",
            hx_post="/submit",
            hx_encoding="multipart/form-data",
            hx_target="this",
            hx_swap="outerHTML",
        )
        return f"""
        <form {form_attrs}>
            <h1 class="submit-form__title">{heading}</h1>
            {name_html}
            {message_html}
            {image_html}
            {error_html}
            <div class="form-actions">
                <button type="submit" class="btn btn-primary">Send</button>
            </div>
        </form>
        """
