"""
PAGASA pubfiles listing scraper.

Reads the autoindex pages of the PAGASA public file repository: the index page
lists climate data directories, and each directory page lists its PDF files.
"""

import logging
from typing import List

import requests
from bs4 import BeautifulSoup

from src.constants import DEFAULT_INDEX_URL, REQUEST_TIMEOUT
from src.climate.exceptions import FetchError
from src.climate.models import (
    EXCLUDED_LABEL,
    HTML_PARSER,
    LISTING_SELECTOR,
    PARENT_DIRECTORY_MARKER,
    PDF_MARKER,
)
from src.utils.url_utils import encode_spaces

logger = logging.getLogger(__name__)


def fetch_listing(url: str) -> BeautifulSoup:
    """Fetch a listing page and parse it

    Raises:
        FetchError: If the page cannot be retrieved
    """
    try:
        with requests.Session() as session:
            response = session.get(url, timeout=REQUEST_TIMEOUT)
            response.raise_for_status()
    except requests.RequestException as e:
        logger.error(f"Failed to fetch listing {url}: {e}")
        raise FetchError(url, "Failed to fetch listing") from e

    return BeautifulSoup(response.text, HTML_PARSER)


def is_climate_directory(label: str) -> bool:
    """False for the parent directory link and bulletin folders"""
    return PARENT_DIRECTORY_MARKER not in label and EXCLUDED_LABEL not in label


def list_directories(index_url: str = DEFAULT_INDEX_URL) -> List[str]:
    """
    Get URLs of the climate data directories on the index page.

    Args:
        index_url: URL of the PAGASA climate index page

    Returns:
        Directory URLs in page order, with spaces encoded as %20
    """
    soup = fetch_listing(index_url)
    labels = [link.get_text() for link in soup.select(LISTING_SELECTOR)]

    directory_urls = [
        encode_spaces(index_url + label)
        for label in labels
        if is_climate_directory(label)
    ]
    logger.info(f"Found {len(directory_urls)} climate directories at {index_url}")
    return directory_urls


def list_pdfs(directory_url: str) -> List[str]:
    """
    Get URLs of all PDF files in a climate data directory.

    Args:
        directory_url: URL of one directory page, e.g.
            ".../cad/CLIMATOLOGICAL%20NORMALS%20(1991-2020)/"

    Returns:
        PDF URLs in link order
    """
    soup = fetch_listing(directory_url)
    hrefs = [link.get("href") for link in soup.select(LISTING_SELECTOR)]

    pdf_urls = [directory_url + href for href in hrefs if href and PDF_MARKER in href]
    logger.info(f"Found {len(pdf_urls)} PDFs at {directory_url}")
    return pdf_urls
