# src/crocodoc/cli.py

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from crocodoc import log_utils
from crocodoc.config import load_config
from crocodoc.download import DownloadClient
from crocodoc.exceptions import CrocodocError
from crocodoc.transport import CrocodocTransport


def _int_arg(value: str) -> int:
    # Range checks belong to the client; this only rejects non-integers
    try:
        return int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crocodoc",
        description="Crocodoc - download documents, text and thumbnails",
    )
    parser.add_argument(
        "--config",
        dest="config_path",
        help="Path to a crocodoc.yaml configuration file",
    )
    parser.add_argument(
        "--log-level",
        help="Console log level (DEBUG, INFO, WARNING, ERROR)",
    )
    parser.add_argument(
        "--log-file",
        dest="log_dir",
        metavar="DIR",
        help="Also write a rotating crocodoc.log into DIR",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    output_parent = argparse.ArgumentParser(add_help=False)
    output_parent.add_argument("uuid", help="The uuid of the document")
    output_parent.add_argument(
        "--output",
        "-o",
        help="File to write the download to (defaults to stdout)",
    )

    document_parser = subparsers.add_parser(
        "document",
        parents=[output_parent],
        help="Download a document's original file or a PDF of it",
    )
    document_parser.add_argument(
        "--pdf", action="store_true", help="Download the document as a PDF"
    )
    document_parser.add_argument(
        "--annotated",
        action="store_true",
        help="Include annotations in the download",
    )
    document_parser.add_argument(
        "--filter",
        dest="annotation_filter",
        action="append",
        metavar="USER_ID",
        help="Only include annotations by this user (can be passed multiple times)",
    )

    subparsers.add_parser(
        "text",
        parents=[output_parent],
        help="Download the text extracted from a document",
    )

    thumbnail_parser = subparsers.add_parser(
        "thumbnail",
        parents=[output_parent],
        help="Download a document's thumbnail",
    )
    thumbnail_parser.add_argument("--width", type=_int_arg)
    thumbnail_parser.add_argument("--height", type=_int_arg)

    return parser


def _write_output(content: bytes, output: Optional[str]) -> None:
    if output:
        path = Path(output)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        log_utils.logger.info(f"Saved {len(content)} bytes to {path}")
    else:
        sys.stdout.buffer.write(content)
        sys.stdout.buffer.flush()


def run_command(client: DownloadClient, args: argparse.Namespace) -> bytes:
    if args.command == "document":
        return client.fetch_document(
            args.uuid,
            as_pdf=args.pdf,
            with_annotations=args.annotated,
            annotation_filter=args.annotation_filter,
        )
    elif args.command == "text":
        return client.fetch_text(args.uuid)
    elif args.command == "thumbnail":
        return client.fetch_thumbnail(args.uuid, width=args.width, height=args.height)
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for the crocodoc command-line interface.

    Loads configuration, builds a DownloadClient and runs the selected download
    subcommand, writing the result to a file or stdout.

    Returns:
        int: 0 on success, 1 when a client error occurred.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        log_utils.set_log_level(args.log_level)
    if args.log_dir:
        log_utils.add_file_logging(Path(args.log_dir), args.log_level or "INFO")

    try:
        config = load_config(args.config_path)
        with CrocodocTransport.from_config(config, DownloadClient.path) as transport:
            content = run_command(DownloadClient(transport), args)
        _write_output(content, args.output)
    except CrocodocError as e:
        log_utils.logger.error(f"Download failed: {e}")
        return 1
    except OSError as e:
        log_utils.logger.error(f"Failed to write output: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
