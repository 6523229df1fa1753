"""Errors raised by the climate PDF lister and downloader"""


class ClimateError(Exception):
    """Base class for PAGASA climate errors"""

    def __init__(self, url: str, message: str):
        super().__init__(f"{message}: {url}")
        self.url = url


class FetchError(ClimateError):
    """A listing page could not be retrieved"""


class DownloadError(ClimateError):
    """A PDF could not be retrieved"""
