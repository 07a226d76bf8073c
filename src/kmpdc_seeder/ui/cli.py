from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from kmpdc_seeder.app import extract_registry, import_registry_data, sync_registry
from kmpdc_seeder.config import configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from kmpdc_seeder.domain.types import RegistryExtraction

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed the KMPDC practitioners register")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("sync", help="Scrape the register into a timestamped CSV file")

    extract = subparsers.add_parser(
        "extract",
        help="Normalize degrees, institutions, specialities and addresses from the scraped CSV",
    )
    extract.add_argument(
        "--csv",
        type=Path,
        help="Path to a practitioners CSV file (defaults to the latest scraped file)",
    )
    extract.add_argument(
        "--summary",
        action="store_true",
        help="Log a summary instead of writing the JSON export",
    )

    import_ = subparsers.add_parser("import", help="Import normalized data into the database")
    import_.add_argument(
        "--data-dir",
        type=Path,
        help="Directory holding the exported JSON documents (defaults to config)",
    )

    return parser.parse_args(list(argv))


def _log_summary(extraction: RegistryExtraction) -> None:
    references = extraction.reference_sets
    rows = (
        ("Practitioners", len(extraction.practitioners)),
        ("Degrees", len(references.degrees)),
        ("Institutions", len(references.institutions)),
        ("Specialities", len(references.specialities)),
        ("Addresses", len(references.addresses)),
        ("Statuses", len(references.statuses)),
        ("Discarded fragments", extraction.fragments_discarded),
    )
    width = max(len(label) for label, _ in rows)
    for label, count in rows:
        log.info("%s  %s", label.ljust(width), count)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        if parsed_args.command == "sync":
            sync_registry()
        elif parsed_args.command == "extract":
            result = extract_registry(csv_path=parsed_args.csv, export=not parsed_args.summary)
            if parsed_args.summary:
                _log_summary(result.extraction)
            else:
                log.info("Extracted register data from %s", result.csv_path)
        elif parsed_args.command == "import":
            import_registry_data(data_dir=parsed_args.data_dir)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error during %s", parsed_args.command)
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
