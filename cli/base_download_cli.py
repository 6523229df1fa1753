#!/usr/bin/env python3
"""Base CLI functionality for climate PDF commands"""

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.constants import DEFAULT_INDEX_URL


def create_base_parser(description: str) -> argparse.ArgumentParser:
    """Create base argument parser with common options"""
    parser = argparse.ArgumentParser(description=description)

    parser.add_argument(
        "--index-url",
        type=str,
        default=DEFAULT_INDEX_URL,
        help=f"PAGASA climate index page (default: {DEFAULT_INDEX_URL})",
    )
    parser.add_argument(
        "--directory-url",
        nargs="+",
        help="Climate data directory URL(s), as printed by list_climate",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    return parser


def setup_logging(debug: bool):
    """Setup logging configuration"""
    log_level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=log_level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
