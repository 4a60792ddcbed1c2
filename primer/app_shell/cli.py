import argparse
import asyncio
import logging
import math
import sys
from pathlib import Path

from primer.components.days import get_day_type, parse_day
from primer.components.normalizer import NormalizeInput, run_normalize, to_normalizer_value
from primer.components.pricing import MostExpensiveInput, Product, run_most_expensive
from primer.components.ratings import FilterByRatingInput, RatedItem, run_filter
from primer.components.sequences import ConcatenateInput, run_concatenate
from primer.components.square import SquareInput, run_square
from primer.components.text_case import FormatStringInput, run_format
from primer.components.vehicles import Car, Vehicle, describe
from primer.rules import RulesAdapter, load_rules_or_default

logger = logging.getLogger("cli")


def parse_number(raw: str) -> int | float | None:
    """
    Parse a finite int or float literal.

    Returns None for anything else, including nan, inf and underscore forms.
    """
    if "_" in raw:
        return None
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        number = float(raw)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


def format_number(value: float) -> str:
    """Whole numbers print without a fraction; others print in full."""
    if isinstance(value, int):
        return str(value)
    if value.is_integer():
        return str(int(value))
    return str(value)


def parse_pair(raw: str) -> tuple[str, float]:
    """Parse NAME=NUMBER."""
    name, sep, text = raw.rpartition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"Expected NAME=NUMBER, got {raw!r}")
    number = parse_number(text.strip())
    if number is None:
        raise argparse.ArgumentTypeError(f"Not a number in {raw!r}")
    return name, number


def parse_finite(raw: str) -> float:
    number = parse_number(raw)
    if number is None:
        raise argparse.ArgumentTypeError(f"Not a finite number: {raw!r}")
    return number


def parse_scalar(raw: str) -> str | int | float:
    """Finite numeric literals become numbers, anything else stays text."""
    number = parse_number(raw)
    return raw if number is None else number


def handle_case(rules: RulesAdapter, args: argparse.Namespace) -> None:
    to_upper: bool | None = None
    if args.upper:
        to_upper = True
    elif args.lower:
        to_upper = False
    out = run_format(FormatStringInput(args.text, to_upper=to_upper), rules=rules)
    print(out.value)


def handle_rating_filter(rules: RulesAdapter, args: argparse.Namespace) -> None:
    items = [RatedItem(title, rating) for title, rating in args.items]
    out = run_filter(FilterByRatingInput(items), rules=rules)
    for item in out.items:
        print(f"{item.title}={format_number(item.rating)}")
    logger.info(f"Dropped {out.dropped_count} item(s) below threshold.")


def handle_concat(rules: RulesAdapter, args: argparse.Namespace) -> None:
    sequences = [s.split(",") if s else [] for s in args.seq or []]
    out = run_concatenate(ConcatenateInput(sequences))
    print(",".join(out.items))


def handle_vehicle(rules: RulesAdapter, args: argparse.Namespace) -> None:
    if args.model:
        print(describe(Car(args.make, args.year, args.model)))
    else:
        print(describe(Vehicle(args.make, args.year)))


def handle_normalize(rules: RulesAdapter, args: argparse.Namespace) -> None:
    value = to_normalizer_value(parse_scalar(args.value))
    out = run_normalize(NormalizeInput(value))
    print(format_number(out.result))


def handle_most_expensive(rules: RulesAdapter, args: argparse.Namespace) -> None:
    products = [Product(name, price) for name, price in args.products]
    out = run_most_expensive(MostExpensiveInput(products))
    if out.product is None:
        print("No products.")
        return
    print(f"{out.product.name}={format_number(out.product.price)}")


def handle_day_type(rules: RulesAdapter, args: argparse.Namespace) -> None:
    try:
        day = parse_day(args.day)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)
    print(get_day_type(day))


def handle_square(rules: RulesAdapter, args: argparse.Namespace) -> None:
    out = asyncio.run(run_square(SquareInput(args.n), rules=rules))
    if not out.success:
        for err in out.errors:
            logger.error(err.message)
        sys.exit(1)
    print(format_number(out.value))


HANDLERS = {
    "case": handle_case,
    "rating-filter": handle_rating_filter,
    "concat": handle_concat,
    "vehicle": handle_vehicle,
    "normalize": handle_normalize,
    "most-expensive": handle_most_expensive,
    "day-type": handle_day_type,
    "square": handle_square,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Utility Primer CLI")
    parser.add_argument("--rules", type=Path, help="Path to rules YAML file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # case
    case_parser = subparsers.add_parser("case", help="Upper-case (default) or lower-case text")
    case_parser.add_argument("text")
    case_flags = case_parser.add_mutually_exclusive_group()
    case_flags.add_argument("--upper", action="store_true", help="Force upper-case")
    case_flags.add_argument("--lower", action="store_true", help="Lower-case instead")

    # rating-filter
    rating_parser = subparsers.add_parser("rating-filter", help="Keep items rated 4 or more")
    rating_parser.add_argument("items", nargs="*", type=parse_pair, metavar="TITLE=RATING")

    # concat
    concat_parser = subparsers.add_parser("concat", help="Concatenate comma-separated sequences")
    concat_parser.add_argument("--seq", action="append", help="Comma-separated items")

    # vehicle
    vehicle_parser = subparsers.add_parser("vehicle", help="Describe a vehicle or car")
    vehicle_parser.add_argument("make")
    vehicle_parser.add_argument("year", type=int)
    vehicle_parser.add_argument("--model", help="Car model; makes this a Car")

    # normalize
    normalize_parser = subparsers.add_parser(
        "normalize", help="Text -> length, number -> doubled"
    )
    normalize_parser.add_argument("value")

    # most-expensive
    pricing_parser = subparsers.add_parser("most-expensive", help="Pick the priciest product")
    pricing_parser.add_argument("products", nargs="*", type=parse_pair, metavar="NAME=PRICE")

    # day-type
    day_parser = subparsers.add_parser("day-type", help="Classify a day as Weekday/Weekend")
    day_parser.add_argument("day")

    # square
    square_parser = subparsers.add_parser("square", help="Square a number after a delay")
    square_parser.add_argument("n", type=parse_finite)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        rules = load_rules_or_default(args.rules)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        sys.exit(1)

    HANDLERS[args.command](RulesAdapter(rules), args)


if __name__ == "__main__":
    main()
