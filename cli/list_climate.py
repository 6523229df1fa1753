#!/usr/bin/env python3
"""List PAGASA climate data directories or the PDFs inside them"""

import sys
from pathlib import Path
from typing import List, Optional

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from cli.base_download_cli import create_base_parser, setup_logging
from src.climate import list_directories, list_pdfs


def main(argv: Optional[List[str]] = None):
    """Main function to list climate directories or PDFs"""
    parser = create_base_parser("List PAGASA climate data directories and PDFs")
    args = parser.parse_args(argv)

    setup_logging(args.debug)

    if args.directory_url:
        urls = [url for directory_url in args.directory_url for url in list_pdfs(directory_url)]
    else:
        urls = list_directories(args.index_url)

    for url in urls:
        print(url)


if __name__ == "__main__":
    main()
