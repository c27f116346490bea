"""
Content harvester: scrapes the portfolio's own pages for biographical text.

Browser mode renders each page in headless Chromium (Playwright) and probes
selector strategies on the rendered DOM. Text mode fetches raw HTML with httpx
and applies regex extraction. Either way the pages are visited one after the
other and a failure never escapes: failed pages degrade to placeholders.
"""
from typing import Dict, Optional

from playwright.async_api import Page, async_playwright

from config import Config
from models.api_models import PortfolioContent
from models.chat_models import AboutPage, HarvestResult
from utils.cache import ContentCache
from utils.constants import (
    ABOUT_SECTIONS,
    CONTACT_FALLBACK_KEY,
    PROJECTS_FALLBACK_KEY,
    HarvestMode,
    PageName,
)
from utils.html_parser import HTMLParser
from utils.http_client import HTTPClientManager
from utils.logger import app_logger

BROWSER_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]


class ContentHarvester:
    """Builds a PortfolioContent snapshot from the live site."""

    def __init__(
        self,
        mode: str = HarvestMode.BROWSER,
        navigation_timeout: Optional[float] = None,
        cache: Optional[ContentCache] = None,
    ):
        """
        Args:
            mode: HarvestMode.BROWSER or HarvestMode.TEXT
            navigation_timeout: Seconds per navigation; None keeps Playwright's default
            cache: Optional content cache consulted before scraping
        """
        if mode not in (HarvestMode.BROWSER, HarvestMode.TEXT):
            raise ValueError(f"Unknown harvest mode: {mode}")
        self.mode = mode
        self.navigation_timeout = navigation_timeout
        self.cache = cache

    async def harvest(self, base_url: str) -> PortfolioContent:
        """
        Scrape the about, projects and contact pages under `base_url`.

        Args:
            base_url: Site origin, e.g. http://localhost:5173

        Returns:
            A complete PortfolioContent; missing pieces hold placeholder text
        """
        base_url = base_url.rstrip("/")

        if self.cache is not None:
            cached = self.cache.get(base_url)
            if cached is not None:
                return cached

        app_logger.info(f"Harvesting portfolio content from {base_url} ({self.mode} mode)")
        try:
            if self.mode == HarvestMode.BROWSER:
                result = await self._harvest_with_browser(base_url)
            else:
                result = await self._harvest_with_http(base_url)
        except Exception as e:
            app_logger.error(f"Harvest failed for {base_url}: {e}")
            return PortfolioContent()

        content = self.merge(result)
        if result.failed_pages:
            app_logger.warning(f"Pages without content: {', '.join(result.failed_pages)}")
        elif self.cache is not None:
            self.cache.set(base_url, content)
        return content

    @staticmethod
    def merge(result: HarvestResult) -> PortfolioContent:
        """Fold per-page results into PortfolioContent, filling placeholders."""
        about_page = result.about_page or AboutPage()
        return PortfolioContent(
            about=about_page.about,
            experience=about_page.experience,
            education=about_page.education,
            skills=about_page.skills,
            projects=result.projects or {},
            contact=result.contact or {},
        )

    async def _harvest_with_browser(self, base_url: str) -> HarvestResult:
        """Render every page in one headless browser, closing it on all exit paths."""
        result = HarvestResult()
        async with async_playwright() as playwright:
            browser = await playwright.chromium.launch(headless=True, args=BROWSER_ARGS)
            try:
                page = await browser.new_page()
                for name in Config.PORTFOLIO_PAGES:
                    html = await self._render_page(page, f"{base_url}/{name}")
                    self._store_page(result, name, html, rendered=True)
            finally:
                await browser.close()
                app_logger.debug("Browser closed")
        return result

    async def _harvest_with_http(self, base_url: str) -> HarvestResult:
        """Fetch raw HTML for every page with the shared httpx client."""
        result = HarvestResult()
        for name in Config.PORTFOLIO_PAGES:
            html = await self._fetch_page(f"{base_url}/{name}")
            self._store_page(result, name, html, rendered=False)
        return result

    async def _render_page(self, page: Page, url: str) -> Optional[str]:
        """
        Navigate and return the rendered DOM, or None if the page failed.

        Waits for network idle, then for the app's root mount element.
        """
        goto_options = {"wait_until": "networkidle"}
        wait_options = {"state": "attached"}
        if self.navigation_timeout is not None:
            goto_options["timeout"] = self.navigation_timeout * 1000
            wait_options["timeout"] = self.navigation_timeout * 1000

        try:
            app_logger.info(f"Navigating to {url}")
            await page.goto(url, **goto_options)
            await page.wait_for_selector(Config.ROOT_SELECTOR, **wait_options)
            html = await page.content()
            app_logger.debug(f"{url} rendered: {len(html)} characters")
            return html
        except Exception as e:
            app_logger.error(f"Failed to render {url}: {e}")
            return None

    async def _fetch_page(self, url: str) -> Optional[str]:
        """GET raw HTML, or None on any HTTP or transport error."""
        try:
            app_logger.info(f"Fetching {url}")
            client = HTTPClientManager.get_scrape_client()
            response = await client.get(url)
            response.raise_for_status()
            app_logger.debug(f"{url} fetched: {len(response.text)} characters")
            return response.text
        except Exception as e:
            app_logger.error(f"Failed to fetch {url}: {e}")
            return None

    def _store_page(self, result: HarvestResult, name: str, html: Optional[str], rendered: bool) -> None:
        """Extract one page into `result`; extraction errors mark the page as failed."""
        if html is None:
            result.failed_pages.append(name)
            return

        try:
            if name == PageName.ABOUT:
                result.about_page = extract_about(html, rendered)
            elif name == PageName.PROJECTS:
                result.projects = extract_entries(html, "project", PROJECTS_FALLBACK_KEY, rendered)
            elif name == PageName.CONTACT:
                result.contact = extract_entries(html, "contact", CONTACT_FALLBACK_KEY, rendered)
        except Exception as e:
            app_logger.error(f"Failed to extract {name} page: {e}")
            result.failed_pages.append(name)


def extract_about(html: str, rendered: bool = True) -> AboutPage:
    """
    Pull the about-page sections out of `html`.
    With no section found at all, the page's visible text becomes the about blob.
    """
    if rendered:
        soup = HTMLParser.parse(html)
        sections = {name: HTMLParser.extract_section(soup, name) for name in ABOUT_SECTIONS}
    else:
        tagged = HTMLParser.extract_tagged_regex(html, "section")
        sections = {name: tagged.get(name) for name in ABOUT_SECTIONS}

    if not any(sections.values()):
        app_logger.warning("No tagged sections on about page, using page text")
        sections["about"] = HTMLParser.visible_text(html)

    return AboutPage(**sections)


def extract_entries(html: str, kind: str, fallback_key: str, rendered: bool = True) -> Dict[str, str]:
    """
    Pull data-<kind> entries (projects or contact channels) out of `html`.
    Rendered pages keep the first entry per key, raw HTML keeps the last.
    """
    if rendered:
        entries = HTMLParser.extract_tagged(HTMLParser.parse(html), f"data-{kind}")
    else:
        entries = HTMLParser.extract_tagged_regex(html, kind)

    if entries:
        return entries

    app_logger.warning(f"No data-{kind} entries found, using page text")
    text = HTMLParser.visible_text(html)
    return {fallback_key: text} if text else {}


def create_harvester(mode: Optional[str] = None, navigation_timeout: Optional[float] = None,
                     cache: Optional[ContentCache] = None) -> ContentHarvester:
    """Harvester for the long-running server, configured from Config unless overridden."""
    return ContentHarvester(
        mode=mode or Config.HARVEST_MODE,
        navigation_timeout=navigation_timeout if navigation_timeout is not None else Config.NAVIGATION_TIMEOUT,
        cache=cache,
    )


async def harvest_content(base_url: str, mode: Optional[str] = None) -> PortfolioContent:
    """One-off harvest with a freshly configured harvester."""
    return await create_harvester(mode=mode).harvest(base_url)
