import logging
from argparse import ArgumentParser
from typing import Iterable, Optional

from pratt_calc.parser import ParserError, parse
from pratt_calc.runtime import CalcRuntimeError, run_line
from pratt_calc.utils import logger
from pratt_calc.value import Number, format_number

EXIT_COMMAND = "exit"

argparser = ArgumentParser(description="Interactive calculator with variables")
argparser.add_argument("-p", "--prompt", default=">> ", help="input prompt (default=%(default)r)")
argparser.add_argument("-d", "--debug", action="store_true", help="log tokens and print the parsed tree of each line")
argparser.add_argument(
    "-e",
    "--expression",
    action="append",
    default=[],
    help="evaluate the line and exit instead of reading stdin, may be repeated",
)


def read_lines(prompt: str) -> Iterable[str]:
    while True:
        try:
            yield input(prompt)
        except EOFError:
            return


def run_session(lines: Iterable[str], variables: dict[str, Number], debug: bool = False) -> None:
    for code in lines:
        if code.strip() == EXIT_COMMAND:
            break
        if not code.strip():
            continue

        try:
            if debug:
                print(parse(code))
            result = run_line(code, variables)
        except (ParserError, CalcRuntimeError) as e:
            print(e)
            continue

        if result is not None:
            print(format_number(result))


def main(argv: Optional[list[str]] = None) -> None:
    args = argparser.parse_args(argv)
    if args.debug:
        logger.setLevel(logging.DEBUG)

    variables: dict[str, Number] = dict()
    lines = args.expression if args.expression else read_lines(args.prompt)
    run_session(lines, variables, debug=args.debug)


if __name__ == "__main__":
    main()
