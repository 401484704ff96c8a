"""
Package Express Shipping Quote Calculator
=========================================

Interactive CLI tool to get a shipping quote for a single package.

Steps run in a fixed order: welcome, weight, dimensions, quote. A package
over the weight or size limit ends the run without a quote.

Usage:
    python -m package_express.scripts.calculator
    python -m package_express.scripts.calculator --max-retries 3
"""

import argparse
import math
import re
from functools import partial
from typing import Callable, NamedTuple

import polars as pl

from package_express.calculate_costs import calculate_costs, format_quote
from package_express.limits import Heavy, Big, ThresholdExceeded, dimension_sum
from package_express.version import VERSION


WELCOME = "Welcome to Package Express. Please follow the instructions below."
INVALID_INPUT = "Invalid input. Please enter a numeric value."
TOO_MANY_RETRIES = "Too many invalid entries. Goodbye."
QUOTE_LINE = "Your estimated total for shipping this package is: {quote}"
THANK_YOU = "Thank you!"

PROMPT_WEIGHT = "Please enter the package weight:"
PROMPT_WIDTH = "Please enter the package width:"
PROMPT_HEIGHT = "Please enter the package height:"
PROMPT_LENGTH = "Please enter the package length:"

# Plain ASCII decimal or exponent notation (no digit separators, no Unicode digits)
NUMBER_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


# =============================================================================
# EXCEPTIONS
# =============================================================================

class InvalidInput(ValueError):
    """Entered text is not a usable number."""


class RetriesExhausted(InvalidInput):
    """Too many invalid entries in a row."""


# =============================================================================
# SUBMISSION
# =============================================================================

class PackageSubmission(NamedTuple):
    """Values entered so far. Fields stay None until accepted."""
    weight: float | None = None
    width: float | None = None
    height: float | None = None
    length: float | None = None

    def is_complete(self) -> bool:
        return None not in self


# =============================================================================
# INPUT
# =============================================================================

def parse_number(text: str) -> float:
    """
    Parse a numeric entry.

    Raises:
        InvalidInput: If text is empty, not a number, or not finite
    """
    text = text.strip()
    if not NUMBER_PATTERN.fullmatch(text):
        raise InvalidInput(f"Not a number: {text!r}")

    value = float(text)

    if not math.isfinite(value):
        raise InvalidInput(f"Not a finite number: {text!r}")

    return value


def prompt_number(prompt: str) -> float:
    """Print prompt on its own line, read one line and parse it."""
    print(prompt)
    return parse_number(input())


def _retry(read: Callable[[], object], max_retries: int | None):
    """
    Call read() until it succeeds.

    Each InvalidInput prints the invalid-input message and calls read() again
    from the start. With max_retries set, the failure after the last allowed
    retry raises RetriesExhausted instead.
    """
    retries = 0
    while True:
        try:
            return read()
        except InvalidInput:
            print(INVALID_INPUT)
            if max_retries is not None and retries >= max_retries:
                raise RetriesExhausted(f"Gave up after {retries} retries") from None
            retries += 1


# =============================================================================
# STEPS
# =============================================================================

def show_welcome(submission: PackageSubmission) -> PackageSubmission:
    print(WELCOME)
    return submission


def get_weight(
    submission: PackageSubmission,
    max_retries: int | None = None
) -> PackageSubmission:
    """
    Collect and validate the package weight.

    Raises:
        ThresholdExceeded: If weight is over the Heavy limit
        RetriesExhausted: If max_retries is set and exceeded
    """
    weight = _retry(lambda: prompt_number(PROMPT_WEIGHT), max_retries)
    Heavy.check(weight)
    return submission._replace(weight=weight)


def _read_dimensions() -> tuple[float, float, float]:
    width = prompt_number(PROMPT_WIDTH)
    height = prompt_number(PROMPT_HEIGHT)
    length = prompt_number(PROMPT_LENGTH)
    return width, height, length


def get_dimensions(
    submission: PackageSubmission,
    max_retries: int | None = None
) -> PackageSubmission:
    """
    Collect and validate width, height and length.

    An invalid entry for any of the three starts the sequence over from width.

    Raises:
        ThresholdExceeded: If width + height + length is over the Big limit
        RetriesExhausted: If max_retries is set and exceeded
    """
    width, height, length = _retry(_read_dimensions, max_retries)
    Big.check(dimension_sum(width, height, length))
    return submission._replace(width=width, height=height, length=length)


def create_shipment_df(submission: PackageSubmission) -> pl.DataFrame:
    """Create a single-row DataFrame from an accepted submission."""
    return pl.DataFrame([{
        "weight": submission.weight,
        "width": submission.width,
        "height": submission.height,
        "length": submission.length,
    }])


def show_quote(submission: PackageSubmission) -> PackageSubmission:
    """
    Calculate and print the quote.

    Raises:
        ValueError: If the submission is missing any value
    """
    if not submission.is_complete():
        raise ValueError(f"Cannot quote an incomplete submission: {submission}")

    row = calculate_costs(create_shipment_df(submission)).row(0, named=True)

    print(QUOTE_LINE.format(quote=format_quote(row["cost_quote"])))
    print(THANK_YOU)
    return submission


Step = tuple[str, Callable[[PackageSubmission], PackageSubmission]]


def build_steps(max_retries: int | None = None) -> list[Step]:
    """Steps in the order they run."""
    return [
        ("welcome", show_welcome),
        ("weight", partial(get_weight, max_retries=max_retries)),
        ("dimensions", partial(get_dimensions, max_retries=max_retries)),
        ("quote", show_quote),
    ]


# =============================================================================
# RUNNER
# =============================================================================

def run(steps: list[Step] | None = None) -> PackageSubmission | None:
    """
    Run steps in order, passing the submission from one to the next.

    Args:
        steps: Steps to run (default: build_steps() with unlimited retries)

    Returns:
        The completed submission, or None if a limit stopped the run
    """
    if steps is None:
        steps = build_steps()

    submission = PackageSubmission()

    for _name, step in steps:
        try:
            submission = step(submission)
        except ThresholdExceeded as e:
            print(e.limit.message)
            return None

    return submission


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=f"Package Express shipping quote calculator (version {VERSION})"
    )
    parser.add_argument(
        "--max-retries",
        type=int,
        default=None,
        help="Re-prompts allowed per step for invalid entries (default: unlimited)"
    )
    args = parser.parse_args(argv)
    if args.max_retries is not None and args.max_retries < 0:
        parser.error("--max-retries must be 0 or more")
    return args


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    try:
        run(build_steps(args.max_retries))

    except RetriesExhausted:
        print(TOO_MANY_RETRIES)
    except (KeyboardInterrupt, EOFError):
        print("\n\nCancelled.")
    except Exception as e:
        print(f"\nError: {e}")
        raise


if __name__ == "__main__":
    main()
