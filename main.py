# main.py
# Command-line driver: feeds (base, pattern) pairs to the search algorithms
# and prints their reports next to a performance comparison.

import argparse
import os
import sys

import matplotlib.ticker as mticker
from loguru import logger
from matplotlib.figure import Figure

from algorithms import ALGORITHMS, run_all_algorithms
from config import CHART_DPI, CHART_FIGSIZE, DEFAULT_CONTEXT_WIDTH, SAMPLE_CASES
from file_utils import extract_text
from logger import setup_logger
from utils import InvalidInput, normalize_text


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Compare substring search algorithms on the same input",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Built-in samples, every algorithm
  %(prog)s

  # Search inline text with two algorithms
  %(prog)s -t "Sampletestsampletestingsample." -p amp -a kmp -a boyer-moore

  # Search a document, ignoring case, and save a performance chart
  %(prog)s -f resume.pdf -p python -p sql --ignore-case --chart perf.png
        """,
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument("-t", "--text", type=str, help="Base text to search in")
    source.add_argument("-f", "--file", type=str, help="Read the base text from a .txt, .pdf or .docx file")

    parser.add_argument(
        "-p",
        "--pattern",
        action="append",
        default=[],
        help="Pattern to search for (repeatable)",
    )
    parser.add_argument(
        "-a",
        "--algorithm",
        action="append",
        choices=list(ALGORITHMS),
        help="Algorithm to run (repeatable, default: all)",
    )
    parser.add_argument(
        "-w",
        "--context-width",
        type=int,
        default=DEFAULT_CONTEXT_WIDTH,
        help=f"Characters of context shown around each hit (default: {DEFAULT_CONTEXT_WIDTH})",
    )
    parser.add_argument("--unsorted", action="store_true", help="List hits in discovery order")
    parser.add_argument("--ignore-case", action="store_true", help="Lower-case base and patterns before searching")
    parser.add_argument("--clean", action="store_true", help="Normalize unicode and collapse whitespace in the base")
    parser.add_argument("--chart", type=str, help="Save a performance chart (one image per pattern)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print progress messages")
    parser.add_argument("--debug", action="store_true", help="Print debug messages")
    return parser


# === INPUT ===

def build_cases(args):
    """Turns parsed arguments into a list of (base, pattern) pairs."""
    if args.text is None and args.file is None:
        if args.pattern:
            raise InvalidInput("--pattern needs --text or --file")
        logger.info("No input given, using built-in samples")
        cases = list(SAMPLE_CASES)
    else:
        if not args.pattern:
            raise InvalidInput("at least one --pattern is required")
        if args.file is not None:
            base = extract_text(args.file)
            if base is None:
                raise InvalidInput(f"could not read text from {args.file}")
        else:
            base = args.text
        cases = [(base, pattern) for pattern in args.pattern]

    prepared = []
    for base, pattern in cases:
        if args.clean:
            base = normalize_text(base)
        if args.ignore_case:
            base, pattern = base.lower(), pattern.lower()
        prepared.append((base, pattern))
    return prepared


# === OUTPUT ===

def format_performance_table(results):
    rows = [("Algorithm", "Time (ms)", "Comparisons", "Hits")]
    for result in results:
        rows.append((
            result["name"], f"{result['time']:.4f}", f"{result['comparisons']:,}", str(result["hits"])
        ))
    widths = [max(len(row[col]) for row in rows) for col in range(len(rows[0]))]
    lines = []
    for row in rows:
        lines.append("  ".join(
            cell.ljust(widths[col]) if col == 0 else cell.rjust(widths[col]) for col, cell in enumerate(row)
        ))
    lines.insert(1, "  ".join("-" * width for width in widths))
    return "\n".join(lines)


def save_performance_chart(results, path, title="Performance Comparison"):
    """Draws execution time as bars and comparisons as a line on a twin axis."""
    fig = Figure(figsize=CHART_FIGSIZE, dpi=CHART_DPI)
    ax1 = fig.add_subplot(111)

    algo_names = [r["name"] for r in results]
    times = [r["time"] for r in results]
    comparisons = [r["comparisons"] for r in results]

    bar_color = "blue"
    ax1.bar(algo_names, times, color=bar_color, label="Time (ms)")
    ax1.set_ylabel("Execution Time (ms)", color=bar_color)
    ax1.tick_params(axis="y", labelcolor=bar_color)
    ax1.tick_params(axis="x", labelrotation=20)
    ax1.set_title(title)

    ax2 = ax1.twinx()
    ax2.plot(algo_names, comparisons, color="red", marker="o", linestyle="--", label="Comparisons")
    ax2.set_ylabel("Comparisons", color="red")
    ax2.tick_params(axis="y", labelcolor="red")

    # --- Force integer ticks on the comparisons axis ---
    ax2.yaxis.set_major_locator(mticker.MaxNLocator(integer=True))
    ax2.yaxis.set_major_formatter(
        mticker.FuncFormatter(lambda x, p: format(int(x), ","))
    )

    fig.tight_layout()
    fig.savefig(path)
    logger.info(f"Chart saved to {path}")
    return path


def chart_path_for(path, index, total):
    if total == 1:
        return path
    root, ext = os.path.splitext(path)
    return f"{root}_{index + 1}{ext or '.png'}"


# === ENTRY POINT ===

def main(argv=None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logger(verbose=args.verbose, debug=args.debug)

    if args.context_width < 0:
        parser.error("--context-width must be non-negative")

    try:
        cases = build_cases(args)
        for index, (base, pattern) in enumerate(cases):
            results = run_all_algorithms(
                base,
                pattern,
                names=args.algorithm,
                sort_by_confidence=not args.unsorted,
                context_width=args.context_width,
            )
            for result in results:
                print(f"{result['name']}:")
                print(result["match"].render())
                print()
            print(format_performance_table(results))
            print()

            if args.chart:
                save_performance_chart(
                    results,
                    chart_path_for(args.chart, index, len(cases)),
                    title=f"Performance Comparison for {pattern!r}",
                )
    except InvalidInput as e:
        logger.error(f"Invalid input: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
