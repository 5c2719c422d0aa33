"""
Web scraping utilities for NFL.com

This module provides functionality for fetching HTML content from NFL.com
stats pages and flattening the statistics table into a GenericTable using
cloudscraper and BeautifulSoup.

Includes polite request delays and retry logic for transient network errors.
"""

import logging
import random
import time
from typing import List, Optional

import cloudscraper
import requests
from bs4 import BeautifulSoup
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    before_sleep_log
)

from ..constants import (
    DEFAULT_HEADERS,
    MAX_REQUEST_DELAY,
    MAX_RETRY_ATTEMPTS,
    MIN_REQUEST_DELAY,
    REQUEST_TIMEOUT,
    USER_AGENT_POOL
)
from ..exceptions import TableNotFound
from .table import GenericTable

# Configure logging
logger = logging.getLogger(__name__)


class NFLScraper:
    """
    Scraper for NFL.com team statistics pages

    Uses a cloudscraper session with browser-like headers and a random
    User-Agent. Requests after the first one wait a random 1-3 seconds.
    Connection errors, timeouts and HTTP errors are retried with exponential
    backoff (up to 4 attempts).
    """

    def __init__(self, headers=None, delay_range=(MIN_REQUEST_DELAY, MAX_REQUEST_DELAY)):
        """
        Initialize the scraper with a cloudscraper session

        Args:
            headers: Optional custom HTTP headers. Uses DEFAULT_HEADERS if not provided.
            delay_range: (min, max) seconds to wait between requests
        """
        self.session = cloudscraper.create_scraper(
            browser={
                'browser': 'chrome',
                'platform': 'windows',
                'desktop': True
            }
        )

        headers = dict(headers or DEFAULT_HEADERS)
        headers['User-Agent'] = self.get_random_user_agent()
        self.session.headers.update(headers)

        self.delay_range = delay_range
        self.request_count = 0

    def get_random_user_agent(self) -> str:
        """
        Get a random User-Agent from the pool

        Returns:
            Random User-Agent string
        """
        return random.choice(USER_AGENT_POOL)

    def wait_between_requests(self) -> float:
        """
        Sleep a random delay before every request except the first

        Returns:
            Seconds slept
        """
        if self.request_count == 0:
            return 0.0

        delay = random.uniform(*self.delay_range)
        logger.debug(f"Waiting {delay:.1f}s before request...")
        time.sleep(delay)
        return delay

    @retry(
        wait=wait_exponential(multiplier=1, min=2, max=30),
        stop=stop_after_attempt(MAX_RETRY_ATTEMPTS),
        retry=retry_if_exception_type(requests.RequestException),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True
    )
    def fetch_page(self, url: str) -> requests.Response:
        """
        Fetch a page from NFL.com

        Args:
            url: The URL to fetch

        Returns:
            Response object from the session

        Raises:
            requests.RequestException: If all retry attempts fail
        """
        self.wait_between_requests()

        logger.info(f"Fetching: {url[:100]}...")
        response = self.session.get(url, timeout=REQUEST_TIMEOUT)
        self.request_count += 1

        # 4xx/5xx raise HTTPError, a RequestException, which triggers a retry
        response.raise_for_status()

        logger.info(f"Successfully fetched: {url[:100]}...")
        return response

    def get_soup(self, url: str) -> BeautifulSoup:
        """
        Get BeautifulSoup object from URL

        Args:
            url: The URL to fetch and parse

        Returns:
            BeautifulSoup object
        """
        response = self.fetch_page(url)
        return BeautifulSoup(response.content, 'html.parser')


def _row_cells(tr) -> List[str]:
    """Text of all th/td cells of a row, repeating cells spanning several columns"""
    cells = []
    for cell in tr.find_all(['th', 'td']):
        text = cell.get_text(' ', strip=True)
        try:
            span = max(int(cell.get('colspan', 1)), 1)
        except ValueError:
            span = 1
        cells.extend([text] * span)
    return cells


def extract_stats_table(html_content, source: Optional[str] = None) -> GenericTable:
    """
    Extract the first statistics table of a page as a GenericTable

    The header row is the last row of <thead> (grouped pages carry a row of
    column groups above it); without <thead> it is the first <tr>. Rows
    without cells are skipped.

    Args:
        html_content: HTML content (str/bytes) or a BeautifulSoup object
        source: Page description for error messages (usually the URL)

    Returns:
        GenericTable with the header row first

    Raises:
        TableNotFound: If the page has no table or the table has no rows
    """
    soup = html_content if isinstance(html_content, BeautifulSoup) else BeautifulSoup(html_content, 'html.parser')
    source = source or 'page'

    table = soup.find('table')
    if table is None:
        raise TableNotFound(source)

    thead = table.find('thead')
    if thead is not None:
        header_rows = [_row_cells(tr) for tr in thead.find_all('tr')]
        header_rows = [row for row in header_rows if row]
        body_trs = [tr for tr in table.find_all('tr') if tr.find_parent('thead') is None]
        rows = header_rows[-1:] + [_row_cells(tr) for tr in body_trs]
    else:
        rows = [_row_cells(tr) for tr in table.find_all('tr')]

    rows = [row for row in rows if row]
    if not rows:
        raise TableNotFound(source)

    logger.debug(f"Extracted table from {source}: {len(rows)} rows x {len(rows[0])} columns")
    return GenericTable.from_rows(rows)
