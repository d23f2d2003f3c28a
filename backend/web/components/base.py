"""
Base component class for the message wall UI.

HTML is generated from plain Python classes instead of a template engine.
Every piece of user-supplied text must pass through `escape` (or
`attributes`, which escapes values) before it reaches the markup.
"""

from typing import Any, Optional
import html


class Component:
    """Base class for all UI components."""

    def render(self) -> str:
        """Render the component as an HTML string."""
        raise NotImplementedError("Subclasses must implement render()")

    @staticmethod
    def escape(text: Optional[Any]) -> str:
        """Escape HTML entities; None renders as an empty string."""
        return html.escape(str(text)) if text is not None else ""

    @staticmethod
    def classes(*args: str, **conditionals: bool) -> str:
        """Build a class string, e.g. classes("dot", active=True) -> "dot active"."""
        classes = [a for a in args if a]
        classes.extend(key for key, value in conditionals.items() if value)
        return " ".join(classes)

    @staticmethod
    def attributes(**attrs: Any) -> str:
        """Build HTML attributes from keyword arguments.

        Trailing underscores are dropped (class_ -> class, for_ -> for) and
        inner underscores become hyphens (hx_post -> hx-post). True renders a
        boolean attribute; False and None are omitted.
        """
        result = []
        for key, value in attrs.items():
            if key.endswith("_"):
                key = key[:-1]
            else:
                key = key.replace("_", "-")

            if value is True:
                result.append(key)
            elif value is not False and value is not None:
                result.append(f'{key}="{html.escape(str(value))}"')

        return " ".join(result)
