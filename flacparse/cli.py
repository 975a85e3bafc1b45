# flacparse/cli.py
# !/usr/bin/env python3

"""
cli.py
~~~~~~~~~~~~~~~

This module provides the command-line interface for the flacparse library.
"""

import argparse
import json
import logging
import os
import sys

from .inspector import STDIN_PATH, TagInspector
from ._exceptions import FlacParseError

FIELDS = ("title", "artist", "album", "tracknumber")


def check_source_path(path):
    """Custom type function for argparse to validate a file path or '-' for stdin."""
    if path == STDIN_PATH:
        return path
    if not os.path.isfile(path):
        raise argparse.ArgumentTypeError(
            f"The path '{path}' does not exist or is not a file."
        )
    return path


def _fail(message):
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def dump(args):
    """Handles the 'dump' subcommand."""
    try:
        comments = TagInspector(args.filepath).inspect_raw()
    except (FlacParseError, FileNotFoundError, OSError) as e:
        _fail(e)

    print(f"Comments: {comments.map()}")
    print(f"Title: {comments.title() or ''}")
    print(f"Artist: {comments.artist() or ''}")
    print(f"Album: {comments.album() or ''}")
    print(f"Number: {comments.tracknumber() or ''}")
    print(f"Vendor: {comments.vendor_string}")


def inspect(args):
    """Handles the 'inspect' subcommand."""
    try:
        metadata = TagInspector(args.filepath).inspect()
    except (FlacParseError, FileNotFoundError, OSError) as e:
        _fail(e)

    if args.field:
        value = getattr(metadata, args.field)()
        print(value if value is not None else "")
    else:
        print(json.dumps(metadata.to_dict(), indent=2, ensure_ascii=False))


def export(args):
    """Handles the 'export' subcommand."""
    try:
        metadata = TagInspector(args.filepath).inspect()

        if args.filepath == STDIN_PATH:
            base_name = "stdin"
        else:
            base_name = os.path.splitext(os.path.basename(args.filepath))[0]
        if not base_name:
            base_name = "tags_export"

        destination_path = args.destination
        if os.path.isdir(destination_path):
            output_path = os.path.join(destination_path, f"{base_name}.json")
        else:
            output_path = destination_path

        output_dir = os.path.dirname(output_path)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)

        json_data = json.dumps(metadata.to_dict(), indent=2, ensure_ascii=False)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(json_data)
        print(f"Tags exported successfully to '{output_path}'.")

    except (FlacParseError, FileNotFoundError, OSError) as e:
        _fail(e)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="flacparse",
        description="Read Vorbis comment tags from FLAC files.",
        epilog="Use 'flacparse <command> --help' for more information on a specific command.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log metadata block scanning details to stderr.",
    )

    subparsers = parser.add_subparsers(
        dest="command", required=True, help="Available commands"
    )

    # --- Parser for the 'dump' command ---
    dump_parser = subparsers.add_parser(
        "dump",
        help="Print the raw comments and the well-known fields of a FLAC file.",
        epilog="Example: flacparse dump /path/to/song.flac\nExample: cat song.flac | flacparse dump -",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    dump_parser.add_argument(
        "filepath",
        type=check_source_path,
        help="Path to the FLAC file, or '-' to read standard input.",
    )
    dump_parser.set_defaults(func=dump)

    # --- Parser for the 'inspect' command ---
    inspect_parser = subparsers.add_parser(
        "inspect",
        help="Print the tags of a FLAC file as JSON.",
        epilog="Example: flacparse inspect song.flac --field artist",
    )
    inspect_parser.add_argument(
        "filepath",
        type=check_source_path,
        help="Path to the FLAC file, or '-' to read standard input.",
    )
    inspect_parser.add_argument(
        "--field",
        choices=FIELDS,
        help="Optional: print only this field.",
    )
    inspect_parser.set_defaults(func=inspect)

    # --- Parser for the 'export' command ---
    export_parser = subparsers.add_parser(
        "export",
        help="Write the tags of a FLAC file to a JSON file.",
        formatter_class=argparse.RawTextHelpFormatter,
        epilog=(
            "Examples:\n"
            "  # Export to a specific file\n"
            "  flacparse export song.flac /tags/song.json\n\n"
            "  # Export into a directory as <name>.json\n"
            "  flacparse export song.flac /json_files/"
        ),
    )
    export_parser.add_argument(
        "filepath",
        type=check_source_path,
        help="Path to the FLAC file, or '-' to read standard input.",
    )
    export_parser.add_argument(
        "destination",
        help="The destination path. Can be a full file path or a directory.",
    )
    export_parser.set_defaults(func=export)

    return parser


def main(argv=None):
    """Defines the command-line entry point for the tool."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if hasattr(args, "func"):
        args.func(args)


if __name__ == "__main__":
    main()
