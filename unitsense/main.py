import argparse
import sys
from environs import Env

from unitsense.logging_config import setup_logging
from unitsense.adapter import CalculatorAPI
from unitsense.infrastructure.output.formatters import JSONOutputFormatter

EXAMPLE_EXPRESSION = "10 GB / hour"


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unitsense",
        description=(
            "Unit-aware calculator: mixes data sizes, durations, lengths and "
            "large-number words, and projects data rates over time."
        ),
    )
    parser.add_argument(
        "expression",
        nargs="*",
        help=f"Expression to evaluate, e.g. '{EXAMPLE_EXPRESSION}'. "
        "Prompts interactively when omitted.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON instead of the console report",
    )
    parser.add_argument(
        "--list-units",
        action="store_true",
        help="Show the supported units and exit",
    )
    return parser


def read_expressions():
    """Yields expressions typed at the prompt until EOF or an empty line."""
    print(f"Enter an expression (try: {EXAMPLE_EXPRESSION}), empty line to quit.")
    while True:
        try:
            expression = input("> ")
        except EOFError:
            return
        if not expression.strip():
            return
        yield expression


def run(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)

    # Load environment variables before logging reads them
    env = Env()
    env.read_env()
    setup_logging(env)

    if args.json:
        api = CalculatorAPI(output_formatter=JSONOutputFormatter())
    else:
        try:
            api = CalculatorAPI.create_from_env(env)
        except ValueError as e:
            print(f"Error: {e}")
            return 2

    if args.list_units:
        print(api.supported_units())
        return 0

    if args.expression:
        expressions = [" ".join(args.expression)]
    else:
        expressions = read_expressions()

    failed = False
    for expression in expressions:
        ok, output = api.render(expression)
        if output is not None:
            print(output)
        failed = failed or not ok
    return 1 if failed else 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
