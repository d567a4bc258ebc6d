#!/usr/bin/env python3
"""
textfit command-line application.

Wraps text to a maximum width using font metrics and prints the result.
Acts as a terminal surface binder for the wrapping core: it gathers text,
font and width, calls the core, and writes the joined lines back out.
"""

import argparse
import sys

from textfit.config import Config
from textfit.core.wrapper import LineWrapper
from textfit.measurers import get_measurer
from textfit.utils.text_helpers import join_lines, normalize_source_text


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="textfit",
        description="textfit - wrap text to a width using font metrics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  textfit "some long text" --width 120                  Wrap with Pillow metrics
  textfit --file notes.txt --width 40 --measurer fixed  Wrap by character count
  echo "text" | textfit --width 80 --max-lines 2        Read stdin, keep 2 lines
        """
    )
    parser.add_argument("text", nargs="?", help="Text to wrap (default: read --file or stdin)")
    parser.add_argument("--file", help="Read text from this file")
    parser.add_argument("--config", default="textfit.json", help="Path to JSON config file")
    parser.add_argument("--width", type=float, help="Maximum line width")
    parser.add_argument("--font", help='Font shorthand, e.g. "bold 16px DejaVu Sans"')
    parser.add_argument("--max-lines", type=int, help="Maximum number of lines (0 = unlimited)")
    parser.add_argument("--ellipsis", help="Marker appended when lines are dropped")
    parser.add_argument("--continuation", help="Marker prepended to forced word splits")
    parser.add_argument("--measurer", choices=["pillow", "fixed"], help="Width measurer to use")
    parser.add_argument("--char-width", type=float, help="Character width for the fixed measurer")
    parser.add_argument("--line-breaker", default="\n", help="Delimiter between output lines")
    parser.add_argument(
        "--normalize",
        action="store_true",
        help="Collapse newlines and repeated spaces before wrapping"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Debug mode: print each line with its measured width"
    )
    parser.add_argument("--quiet", action="store_true", help="Suppress font fallback notices")
    return parser


def read_text(args) -> str:
    """
    Get the text to wrap from the arguments, a file, or stdin.

    A single trailing newline from a file or stdin is dropped.
    """
    if args.text is not None:
        return args.text
    if args.file:
        with open(args.file, 'r', encoding='utf-8') as f:
            text = f.read()
    else:
        text = sys.stdin.read()
    return text[:-1] if text.endswith("\n") else text


def apply_overrides(config: Config, args):
    """Write command-line overrides into the loaded config."""
    wrap = config.config.setdefault("wrap", {})
    if args.width is not None:
        wrap["max_width"] = args.width
    if args.max_lines is not None:
        wrap["max_line_count"] = args.max_lines
    if args.ellipsis is not None:
        wrap["ellipsis"] = args.ellipsis
    if args.continuation is not None:
        wrap["long_word_continuation"] = args.continuation
    if args.font is not None:
        config.config["font"] = args.font

    measurer = config.config.setdefault("measurer", {})
    if args.measurer is not None:
        measurer["type"] = args.measurer
    if args.char_width is not None:
        measurer["char_width"] = args.char_width


def run(args) -> str:
    """
    Wrap text as described by parsed arguments.

    Returns:
        Text to print
    """
    config = Config(args.config)
    apply_overrides(config, args)

    text = read_text(args)
    if args.normalize:
        text = normalize_source_text(text)

    wrapper = LineWrapper(get_measurer(config, quiet=args.quiet))
    lines = wrapper.wrap_with_config(text, config.get_font(), config.get_wrap_config())

    if args.debug:
        return "\n".join(f"{line.width:8.2f} | {line.content}" for line in lines)
    return join_lines(lines, args.line_breaker)


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        output = run(args)
    except Exception as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        sys.exit(1)

    print(output)


if __name__ == "__main__":
    main()
