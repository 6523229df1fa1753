"""Models and scraping configuration for PAGASA climate PDFs"""

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from src.constants import CLIMATE_SUBDIR

# Index and directory pages are plain autoindex listings inside <pre>
LISTING_SELECTOR = "pre a"
HTML_PARSER = "html.parser"

# Index entries that are not climate data directories
PARENT_DIRECTORY_MARKER = "../"
EXCLUDED_LABEL = "Bulletin"

# Substring that marks a PDF link on a directory page
PDF_MARKER = "pdf"


@dataclass(frozen=True)
class ClimatePdf:
    """A PDF URL together with where it lands locally"""

    url: str
    year: str
    file_name: str

    def download_dir(self, directory: Union[str, Path]) -> Path:
        return Path(directory) / CLIMATE_SUBDIR / self.year

    def target_path(self, directory: Union[str, Path]) -> Path:
        """{directory}/climate/{year}/{file_name}"""
        return self.download_dir(directory) / self.file_name
