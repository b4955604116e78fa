from __future__ import annotations

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from .errors import RenderError

CHROMIUM_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]


class ChromiumRenderer:
    """Prints an HTML document to PDF with headless Chromium.

    The browser lives only for one render and is closed on every exit path.
    """

    def __init__(self, page_format: str = "A4", margin: str = "1in"):
        self.page_format = page_format
        self.margin = margin

    async def render(self, html: str) -> bytes:
        try:
            async with async_playwright() as p:
                browser = await p.chromium.launch(headless=True, args=CHROMIUM_ARGS)
                try:
                    page = await browser.new_page()
                    await page.set_content(html)
                    return await page.pdf(
                        format=self.page_format,
                        margin={
                            "top": self.margin,
                            "right": self.margin,
                            "bottom": self.margin,
                            "left": self.margin,
                        },
                    )
                finally:
                    await browser.close()
        except PlaywrightError as e:
            raise RenderError(f"PDF rendering failed: {e}") from e
