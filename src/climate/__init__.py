"""PAGASA climate PDF listing and downloading module"""

from src.climate.downloader import (
    download_all,
    download_directory,
    download_pdf,
    download_pdfs,
    resolve_pdf,
)
from src.climate.exceptions import ClimateError, DownloadError, FetchError
from src.climate.lister import list_directories, list_pdfs
from src.climate.models import ClimatePdf

__all__ = [
    "list_directories",
    "list_pdfs",
    "download_pdf",
    "download_pdfs",
    "download_directory",
    "download_all",
    "resolve_pdf",
    "ClimatePdf",
    "ClimateError",
    "FetchError",
    "DownloadError",
]
