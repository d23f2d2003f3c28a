"""
QR code pointing visitors at the submission page.

The image is produced by the public qrserver.com API, so the kiosk needs no
local QR library.
"""

from urllib.parse import quote

from .base import Component

QR_API_URL = "https://api.qrserver.com/v1/create-qr-code/"


class QrCode(Component):
    def __init__(self, target_url: str, *, size: int = 200) -> None:
        self.target_url = target_url
        self.size = size

    @property
    def image_url(self) -> str:
        return f"{QR_API_URL}?size={self.size}x{self.size}&data={quote(self.target_url, safe='')}"

    def render(self) -> str:
        img_attrs = self.attributes(
            src=self.image_url,
            alt="QR code to the submit page",
            width=str(self.size),
            height=str(self.size),
            class_="qr-code__image",
        )
        return (
            '<figure class="qr-code">'
            f"<img {img_attrs}>"
            f'<figcaption class="qr-code__caption">Scan to post: {self.escape(self.target_url)}</figcaption>'
            "</figure>"
        )
