import argparse
import sys

from . import __version__
from .export import default_output_path, export_css
from .palette import load_theme_from_json


def build_parser():
    parser = argparse.ArgumentParser(
        prog="material-theme-css",
        description="Convert a Material Design theme JSON into CSS RGB variables",
    )
    parser.add_argument(
        "--input", "-i",
        metavar="FILE",
        required=True,
        help="Source JSON theme file to process",
    )
    parser.add_argument(
        "--output", "-o",
        metavar="FILE",
        default=None,
        help="Output CSS file (default: <input name>-rgb.css)",
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Show the version and exit",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    input_path = args.input
    output_path = args.output or default_output_path(input_path)

    print("Starting theme conversion...")
    print(f"  > Input : {input_path}")
    print(f"  > Output: {output_path}")

    try:
        schemes = load_theme_from_json(input_path)
        export_css(schemes, output_path)
    except (OSError, ValueError) as e:
        print(f"\nAn error occurred: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"\nSuccess! CSS file has been saved to: {output_path}")


if __name__ == "__main__":
    main()
