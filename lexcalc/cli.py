#!/usr/bin/env python3

import argparse as arg
import logging
import sys

from lexcalc.errors import ConfigurationError
from lexcalc.scripting import calculator

def evaluate(src: str, args, out=None) -> bool:
    try:
        result = calculator.calc(src, strict=args.strict)
    except (ArithmeticError, ConfigurationError) as e:
        print(f"Error, {e}", file=sys.stderr)
        return False

    if args.rpn:
        print(calculator.to_rpn(src), file=out)
    print(result, file=out)
    return True

def repl(args, stdin=None, out=None):
    stdin = stdin or sys.stdin
    interactive = stdin.isatty()
    if interactive:
        import readline # noqa: F401, line editing for input()

    while True:
        try:
            src = input("expr: ") if interactive else stdin.readline()
        except EOFError:
            break
        src = src.rstrip('\n')
        if not src:
            break
        evaluate(src, args, out)

def main(argv=None) -> int:
    parser = arg.ArgumentParser(
        prog='lexcalc',
        description='Evaluates integer arithmetic expressions through Reverse Polish Notation',
        epilog='Reads expressions from stdin when none is given')

    parser.add_argument('expression', nargs='?')
    parser.add_argument('-r', '--rpn', dest='rpn', action='store_true', default=False)
    parser.add_argument('-s', '--strict', dest='strict', action='store_true', default=False)
    parser.add_argument('-v', '--verbose', dest='verbose', action='store_true', default=False)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.expression is None:
        repl(args)
        return 0
    return 0 if evaluate(args.expression, args) else 1

if __name__ == '__main__':
    sys.exit(main())
