# Message wall component system
# Pure Python components for HTML generation

from .base import Component
from .layout import Layout
from .cards import SlideCard, SuccessCard
from .forms import FormField, TextAreaField, FileUploadField, TextInputField, SubmissionForm
from .qr_code import QrCode
from .queue_indicator import QueueIndicator

__all__ = [
    "Component",
    "Layout",
    "SlideCard",
    "SuccessCard",
    "FormField",
    "TextAreaField",
    "FileUploadField",
    "TextInputField",
    "SubmissionForm",
    "QrCode",
    "QueueIndicator",
]
