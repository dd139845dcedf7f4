"""CLI entry point: python -m zeck <command>"""

import argparse
import sys
from pathlib import Path


def main(argv=None):
    from . import __version__

    parser = argparse.ArgumentParser(
        prog="zeck",
        description="Compress data using the Zeckendorf representation algorithm",
    )
    parser.add_argument("--version", action="version", version=f"zeck {__version__}")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- compress ---
    compress_parser = subparsers.add_parser("compress", help="Compress a file to .zeck")
    compress_parser.add_argument("input", type=str, help="Input file (any format)")
    compress_parser.add_argument("-o", "--output", type=str, default=None,
                                 help="Output file path (default: INPUT.zeck)")
    compress_parser.add_argument("-e", "--endian", type=str, default="best",
                                 choices=["best", "big", "little"],
                                 help="Byte order used to read the input as an integer (default: best)")
    compress_parser.add_argument("-q", "--quiet", action="store_true",
                                 help="Do not print compression statistics")

    # --- decompress ---
    decompress_parser = subparsers.add_parser("decompress", help="Decompress a .zeck file")
    decompress_parser.add_argument("input", type=str, help="Compressed .zeck file")
    decompress_parser.add_argument("-o", "--output", type=str, default=None,
                                   help="Output file path (default: INPUT without .zeck)")
    decompress_parser.add_argument("-q", "--quiet", action="store_true",
                                   help="Do not print decompression statistics")

    # --- info ---
    info_parser = subparsers.add_parser("info", help="Show header information for a .zeck file")
    info_parser.add_argument("input", type=str, help="Compressed .zeck file")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from .cli_formatting import print_error

    try:
        if args.command == "compress":
            _cmd_compress(args)
        elif args.command == "decompress":
            _cmd_decompress(args)
        elif args.command == "info":
            _cmd_info(args)
    # ZeckFormatError is a ValueError; empty input raises ValueError too.
    except (ValueError, OSError) as exc:
        print_error(str(exc))
        sys.exit(1)


def _cmd_compress(args):
    from . import DEFAULT_CONFIG, compress_file
    from .cli_formatting import print_compress_results, print_warning

    size = Path(args.input).stat().st_size
    if size > DEFAULT_CONFIG.large_input_warning_bytes:
        print_warning(
            f"Input is {size:,} bytes; compression above "
            f"{DEFAULT_CONFIG.large_input_warning_bytes:,} bytes is slow and memory hungry"
        )

    stats = compress_file(args.input, args.output, endian=args.endian)
    if not args.quiet:
        print_compress_results(stats)


def _cmd_decompress(args):
    from . import decompress_file
    from .cli_formatting import print_decompress_results

    stats = decompress_file(args.input, args.output)
    if not args.quiet:
        print_decompress_results(stats)


def _cmd_info(args):
    from . import deserialize
    from .cli_formatting import print_file_info

    path = Path(args.input)
    blob = path.read_bytes()
    print_file_info(path.name, deserialize(blob), len(blob))


if __name__ == "__main__":
    main()
