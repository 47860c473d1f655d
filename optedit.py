#!/usr/bin/env python3


"""Prints a minimum-cost edit script turning FROM into TO."""


import argparse
import levenshtein
import logging
import sys


from levenshtein import Costs, CostOverflowError, Edit, Op, STANDARD_COSTS
from typing import NoReturn, Optional, Sequence


PROG = 'optedit'


class ArgumentParser(argparse.ArgumentParser):
    """Exits with status 1 on usage errors."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f'{self.prog}: error: {message}\n')


def format_edit(edit: Edit, both: bool=False) -> str:
    if edit.op == Op.DEL:
        symbols = [edit.source]
    elif edit.op == Op.INS:
        symbols = [edit.target]
    elif both:
        symbols = [edit.source, edit.target]
    else:
        symbols = [edit.target]
    return ' '.join([edit.op.name] + [str(s) for s in symbols])


def make_parser() -> ArgumentParser:
    arg_parser = ArgumentParser(prog=PROG, description=__doc__)
    arg_parser.add_argument('source', metavar='FROM', help='source string')
    arg_parser.add_argument('target', metavar='TO', help='target string')
    arg_parser.add_argument('-b', '--both', action='store_true',
            help='Print both the source and the target symbol for SKP and REP.')
    for op in Op:
        arg_parser.add_argument(f'--{op.value}', type=int, default=STANDARD_COSTS[op],
                metavar='N', help=f'Cost of {op.name} (default: %(default)s).')
    arg_parser.add_argument('-v', '--verbose', action='count', default=0,
            help='Verbosity. Give once for costs, twice for debugging.')
    return arg_parser


def main(argv: Optional[Sequence[str]]=None) -> int:
    arg_parser = make_parser()
    args = arg_parser.parse_args(argv)
    if args.verbose == 1:
        logging.basicConfig(level=logging.INFO)
    elif args.verbose >= 2:
        logging.basicConfig(level=logging.DEBUG)
    try:
        costs = Costs(skip=args.skip, delete=args.delete, insert=args.insert,
                replace=args.replace)
    except ValueError as e:
        arg_parser.error(str(e))
    logging.info('Costs: %s', costs)
    try:
        script = levenshtein.plan(args.source, args.target, costs)
    except CostOverflowError as e:
        arg_parser.exit(1, f'{arg_parser.prog}: error: {e}\n')
    logging.info('Total cost: %d', levenshtein.script_cost(script))
    for edit in script:
        print(format_edit(edit, args.both))
    return 0


if __name__ == '__main__':
    sys.exit(main())
