#!/usr/bin/env python3
"""Download PAGASA climate data PDFs"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from cli.base_download_cli import create_base_parser, setup_logging
from src.climate import (
    download_all,
    download_directory,
    download_pdfs,
    list_pdfs,
    resolve_pdf,
)
from src.constants import DATA_DIR, DEFAULT_CONCURRENT


def main(argv: Optional[List[str]] = None):
    """Main function to download climate PDFs"""
    parser = create_base_parser("Download PAGASA climate data PDFs")

    parser.add_argument(
        "--pdf-url",
        nargs="+",
        help="Individual PDF URL(s) to download",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path(DATA_DIR),
        help=f"Base directory for downloads (default: {DATA_DIR})",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Re-download files that already exist",
    )
    parser.add_argument(
        "--concurrent",
        type=int,
        default=DEFAULT_CONCURRENT,
        help=f"Number of concurrent downloads (default: {DEFAULT_CONCURRENT})",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print target paths without downloading (needs --pdf-url or --directory-url)",
    )

    args = parser.parse_args(argv)

    setup_logging(args.debug)

    if args.dry_run:
        pdf_urls = list(args.pdf_url or [])
        for directory_url in args.directory_url or []:
            pdf_urls.extend(list_pdfs(directory_url))
        if not pdf_urls:
            parser.error("--dry-run needs --pdf-url or --directory-url")
        for pdf_url in pdf_urls:
            print(resolve_pdf(pdf_url).target_path(args.output_dir))
        return

    output_files = []
    if args.pdf_url:
        output_files.extend(
            download_pdfs(args.pdf_url, args.output_dir, args.overwrite, args.concurrent)
        )
    if args.directory_url:
        for directory_url in args.directory_url:
            output_files.extend(
                download_directory(
                    directory_url, args.output_dir, args.overwrite, args.concurrent
                )
            )
    if not args.pdf_url and not args.directory_url:
        logging.info(f"Downloading all climate directories from {args.index_url}")
        output_files = download_all(
            args.index_url, args.output_dir, args.overwrite, args.concurrent
        )

    logging.info(f"{len(output_files)} PDFs available under {args.output_dir}")


if __name__ == "__main__":
    main()
