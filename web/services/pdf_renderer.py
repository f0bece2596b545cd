"""
HTML to PDF conversion through headless Chromium (Playwright).
"""

import logging
import time

from playwright.async_api import async_playwright
from playwright.sync_api import sync_playwright

from web.config import get_renderer_config

logger = logging.getLogger(__name__)


async def render_pdf(html: str) -> bytes:
    """
    Print an HTML document to PDF bytes.

    A fresh browser is launched for every call and closed afterwards,
    whether or not printing succeeded.

    Args:
        html: Complete HTML document

    Returns:
        PDF file contents
    """
    config = get_renderer_config()
    started = time.time()

    async with async_playwright() as p:
        browser = await p.chromium.launch(headless=True, args=config['browser_args'])
        try:
            page = await browser.new_page()
            await page.set_content(html, wait_until=config['wait_until'])
            pdf_bytes = await page.pdf(
                format=config['pdf_format'],
                print_background=config['print_background'],
            )
        finally:
            await browser.close()

    logger.info(f"Rendered PDF ({len(pdf_bytes)} bytes) in {time.time() - started:.2f}s")
    return pdf_bytes


def render_pdf_sync(html: str) -> bytes:
    """Blocking variant for command-line use outside an event loop."""
    config = get_renderer_config()

    with sync_playwright() as p:
        browser = p.chromium.launch(headless=True, args=config['browser_args'])
        try:
            page = browser.new_page()
            page.set_content(html, wait_until=config['wait_until'])
            pdf_bytes = page.pdf(
                format=config['pdf_format'],
                print_background=config['print_background'],
            )
        finally:
            browser.close()

    return pdf_bytes
