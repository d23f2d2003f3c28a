"""
Form components for the message wall.
"""

from .fields import FormField, TextAreaField, FileUploadField, TextInputField
from .submission_form import SubmissionForm

__all__ = [
    "FormField",
    "TextAreaField",
    "FileUploadField",
    "TextInputField",
    "SubmissionForm",
]
