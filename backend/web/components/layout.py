"""
Layout component for the message wall.

Wraps pre-rendered content into a complete HTML document.
"""

from .base import Component

HTMX_SRC = "https://unpkg.com/htmx.org@1.9.12"
# Inline indicator styles would need style-src 'unsafe-inline'.
HTMX_CONFIG = '{"includeIndicatorStyles": false}'


class Layout(Component):
    """Main layout component that assembles the complete page"""

    def __init__(self, title: str, content: str, *, event_title: str = "", body_class: str = "") -> None:
        """
        Args:
            title: Page title (will be escaped)
            content: Main content HTML (pre-rendered components)
            event_title: Suffix for the document title (will be escaped)
            body_class: Optional class on <body>, e.g. "kiosk"
        """
        self.title = title
        self.content = content
        self.event_title = event_title
        self.body_class = body_class

    def render(self) -> str:
        doc_title = self.escape(self.title)
        if self.event_title and self.event_title != self.title:
            doc_title = f"{doc_title} - {self.escape(self.event_title)}"
        body_attrs = self.attributes(class_=self.body_class or None)
        return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{doc_title}</title>
    <meta name="htmx-config" content='{HTMX_CONFIG}'>
    <link rel="stylesheet" href="/static/css/wall.css?v=1">
    <script src="{HTMX_SRC}"></script>
</head>
<body{(" " + body_attrs) if body_attrs else ""}>
    <div id="live-region" class="sr-only" role="status" aria-live="polite" aria-atomic="true"></div>
    <main id="main-content" class="main-content" role="main">
        {self.content}
    </main>
</body>
</html>"""
