"""
PAGASA climate PDF downloader.

Downloads climate data PDFs from PAGASA pubfiles into a year-partitioned
directory tree: {directory}/climate/{year}/{file_name}. Files already present
are skipped unless overwrite is requested.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import List, Sequence, Union

import requests
from tqdm import tqdm

from src.constants import (
    DATA_DIR,
    DEFAULT_CONCURRENT,
    DEFAULT_INDEX_URL,
    DOWNLOAD_CHUNK_SIZE,
    REQUEST_TIMEOUT,
    UNKNOWN_YEAR,
)
from src.climate.exceptions import DownloadError
from src.climate.lister import list_directories, list_pdfs
from src.climate.models import ClimatePdf
from src.utils.url_utils import extract_year, sanitize_file_name

logger = logging.getLogger(__name__)


def resolve_pdf(pdf_url: str) -> ClimatePdf:
    """Work out the year bucket and local file name for a PDF URL (no I/O)"""
    year = extract_year(pdf_url)
    if year is None:
        logger.warning(f"No year found in {pdf_url}, using '{UNKNOWN_YEAR}'")
        year = UNKNOWN_YEAR

    return ClimatePdf(url=pdf_url, year=year, file_name=sanitize_file_name(pdf_url))


def _fetch_to_file(url: str, output_path: Path):
    """Stream a URL to disk, truncating any existing file"""
    try:
        with requests.get(url, stream=True, timeout=REQUEST_TIMEOUT) as response:
            response.raise_for_status()
            with open(output_path, "wb") as file:
                for chunk in response.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
                    file.write(chunk)
    except requests.RequestException as e:
        logger.error(f"Failed to download {url}: {e}")
        raise DownloadError(url, "Failed to download PDF") from e


def download_pdf(
    pdf_url: str,
    directory: Union[str, Path] = DATA_DIR,
    overwrite: bool = False,
) -> Path:
    """
    Download a single climate data PDF.

    Args:
        pdf_url: URL of a PDF on PAGASA pubfiles
        directory: Base directory for downloads (default: data-raw)
        overwrite: Re-download even if the file is already present

    Returns:
        Path of the local file, whether or not it was fetched in this call
    """
    pdf = resolve_pdf(pdf_url)

    download_dir = pdf.download_dir(directory)
    download_dir.mkdir(parents=True, exist_ok=True)

    output_file = pdf.target_path(directory)
    if output_file.exists() and not overwrite:
        logger.debug(f"File already exists, skipping download: {output_file}")
        return output_file

    _fetch_to_file(pdf.url, output_file)
    logger.debug(f"Downloaded {pdf.url} -> {output_file}")
    return output_file


def download_pdfs(
    pdf_urls: Sequence[str],
    directory: Union[str, Path] = DATA_DIR,
    overwrite: bool = False,
    max_workers: int = DEFAULT_CONCURRENT,
) -> List[Path]:
    """
    Download many climate data PDFs.

    Fails fast: the first failed download is raised and downloads that have
    not started yet are cancelled. Files finished before the failure stay on disk.

    Args:
        pdf_urls: PDF URLs to download
        directory: Base directory for downloads (default: data-raw)
        overwrite: Re-download files that are already present
        max_workers: Maximum number of concurrent downloads (default: 1)

    Returns:
        Local file paths, in the same order as pdf_urls
    """
    if max_workers < 1:
        raise ValueError(f"max_workers must be at least 1, got {max_workers}")

    if max_workers == 1:
        output_files = [
            download_pdf(url, directory, overwrite)
            for url in tqdm(pdf_urls, desc="Downloading climate PDFs")
        ]
    else:
        output_files = _download_concurrently(pdf_urls, directory, overwrite, max_workers)

    logger.info(f"Downloaded {len(output_files)} PDFs to {directory}")
    return output_files


def _download_concurrently(
    pdf_urls: Sequence[str],
    directory: Union[str, Path],
    overwrite: bool,
    max_workers: int,
) -> List[Path]:
    """Thread pool variant of download_pdfs, results kept in input order

    URLs that resolve to the same local file are downloaded once, so two
    workers never write the same path.
    """
    target_paths = [resolve_pdf(url).target_path(directory) for url in pdf_urls]

    # First URL wins for each target path
    url_by_path = {}
    for url, target_path in zip(pdf_urls, target_paths):
        url_by_path.setdefault(target_path, url)

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        future_by_path = {
            target_path: executor.submit(download_pdf, url, directory, overwrite)
            for target_path, url in url_by_path.items()
        }
        futures = list(future_by_path.values())

        with tqdm(total=len(futures), desc="Downloading climate PDFs") as pbar:
            for future in as_completed(futures):
                try:
                    future.result()
                except Exception:
                    pbar.update(1)
                    for pending in futures:
                        pending.cancel()
                    raise  # Fail fast - don't suppress errors
                pbar.update(1)

    return [future_by_path[target_path].result() for target_path in target_paths]


def download_directory(
    directory_url: str,
    directory: Union[str, Path] = DATA_DIR,
    overwrite: bool = False,
    max_workers: int = DEFAULT_CONCURRENT,
) -> List[Path]:
    """Download every PDF listed in one climate data directory"""
    pdf_urls = list_pdfs(directory_url)
    return download_pdfs(pdf_urls, directory, overwrite, max_workers)


def download_all(
    index_url: str = DEFAULT_INDEX_URL,
    directory: Union[str, Path] = DATA_DIR,
    overwrite: bool = False,
    max_workers: int = DEFAULT_CONCURRENT,
) -> List[Path]:
    """Download the PDFs of every climate data directory on the index page"""
    output_files = []
    for directory_url in list_directories(index_url):
        logger.info(f"Downloading {directory_url}")
        output_files.extend(
            download_directory(directory_url, directory, overwrite, max_workers)
        )
    return output_files
