#!/usr/bin/env python3
"""Main CLI entry point for pagasa-climate

This allows running CLI commands via:
    python -m cli list_climate --help
    python -m cli download_climate --help
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


def main():
    """Main CLI dispatcher"""
    if len(sys.argv) < 2:
        print("Usage: python -m cli <command> [args...]")
        print("\nAvailable commands:")
        print("  list_climate         List PAGASA climate directories or their PDFs")
        print("  download_climate     Download PAGASA climate PDFs")
        print("\nFor help on a specific command:")
        print("  python -m cli <command> --help")
        sys.exit(1)

    command = sys.argv[1]
    # Remove the command from sys.argv so the subcommand can parse its own args
    sys.argv = [sys.argv[0]] + sys.argv[2:]

    if command == "list_climate":
        from cli.list_climate import main as list_main

        list_main()
    elif command == "download_climate":
        from cli.download_climate import main as download_main

        download_main()
    else:
        print(f"Unknown command: {command}")
        print("Available commands: list_climate, download_climate")
        sys.exit(1)


if __name__ == "__main__":
    main()
