import argparse
import sys

from . import __version__
from .batch import process_batch
from .engine import transform
from .errors import DeCoderError, EmptyInputError
from .log import log_info, set_verbose
from .models import DEFAULT_CAESAR_SHIFT, ConversionOptions
from .registry import SCHEME_INFO, Scheme, all_schemes, scheme_from_name

# ==========================================
#  CLI LOGIC
# ==========================================

def list_schemes():
    """Print all available schemes and exit."""
    print("\nAvailable Schemes:")
    print("=" * 60)
    for scheme in all_schemes():
        info = SCHEME_INFO[scheme]
        reverse = "<-> decode" if info.supports_reverse else "  encode  "
        print(f"  {scheme.value:<10} [{reverse}]  {info.display_name}: {info.description}")
    print("=" * 60)
    print(f"\nTotal: {len(SCHEME_INFO)} scheme(s) registered.")


def _progress_printer(fraction: float):
    width = 30
    filled = int(round(fraction * width))
    bar = "#" * filled + "." * (width - filled)
    print(f"\r[{bar}] {fraction * 100:5.1f}%", end="", file=sys.stderr, flush=True)
    if fraction >= 1.0:
        print(file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="decoder-suite",
        description=f"DeCoder Suite v{__version__} (Morse, Base64, Caesar and more)",
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    method_help = "\n".join(f"  {s.value:<10}: {s.display_name}" for s in all_schemes())
    parser.add_argument("-m", "--method", default="morse", metavar="SCHEME",
                        help=f"Select scheme by key or display name (default: morse).\n{method_help}")

    # Main action group
    action_group = parser.add_mutually_exclusive_group(required=True)
    action_group.add_argument("-e", "--encode", action="store_true", help="Encode mode")
    action_group.add_argument("-d", "--decode", action="store_true", help="Decode mode")
    action_group.add_argument("-l", "--list", action="store_true", help="List all available schemes")

    parser.add_argument("--shift", type=int, default=DEFAULT_CAESAR_SHIFT, metavar="N",
                        help=f"Caesar shift, 1-25 (default: {DEFAULT_CAESAR_SHIFT}). Ignored by other schemes")
    parser.add_argument("--batch", action="store_true",
                        help="Process input line by line with a progress bar on stderr")

    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable verbose output (info and warning messages)")

    # I/O options
    io_group = parser.add_mutually_exclusive_group()
    io_group.add_argument("-t", "--text", help="Direct text input")
    io_group.add_argument("-i", "--input", help="Input file path")

    parser.add_argument("-o", "--output", help="Output file path")
    return parser


def read_source(args) -> str:
    if args.text is not None:
        return args.text
    if args.input:
        try:
            with open(args.input, "r", encoding="utf-8") as f:
                return f.read()
        except FileNotFoundError:
            sys.exit(f"Error: File '{args.input}' not found.")
    if not sys.stdin.isatty():
        return sys.stdin.read()

    print("[DECODER] Paste input below. Ctrl+D (Unix) or Ctrl+Z (Win) to end:", file=sys.stderr)
    try:
        return sys.stdin.read()
    except KeyboardInterrupt:
        sys.exit(0)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    set_verbose(args.verbose)

    if args.list:
        list_schemes()
        return 0

    try:
        scheme = scheme_from_name(args.method)
        # Only the Caesar cipher reads the shift
        shift = args.shift if scheme is Scheme.CAESAR else DEFAULT_CAESAR_SHIFT
        options = ConversionOptions(reverse=args.decode, caesar_shift=shift)
    except DeCoderError as e:
        sys.exit(f"Error: {e}")

    # 1. READ INPUT
    source_text = read_source(args)
    if not source_text:
        sys.exit(f"Error: {EmptyInputError()}")

    # 2. CONVERT
    mode = "Decode" if args.decode else "Encode"
    log_info(f"{mode} with {scheme.display_name} ({len(source_text)} character(s)).")
    try:
        if args.batch:
            result = process_batch(source_text, scheme, options, on_progress=_progress_printer)
        else:
            result = transform(scheme, source_text, options)
    except DeCoderError as e:
        sys.exit(f"{mode} Error ({scheme.value}): {e}")

    # 3. WRITE OUTPUT
    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(result)
        except OSError as e:
            sys.exit(f"Error writing output: {e}")
        log_info(f"Saved {args.output}")
    else:
        print(result, end="" if args.batch else "\n")
    return 0
