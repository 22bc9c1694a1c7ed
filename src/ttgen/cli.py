import argparse
import logging
import sys

from . import __version__
from .config import ALPHABETS, DEFAULT_MAX_TABLE_VARS, MAX_TABLE_VARS_LIMIT, Config
from .errors import VariableCapacityError
from .session import Session

log = logging.getLogger(__name__)


def max_vars_arg(text):
    value = int(text)
    if not 1 <= value <= MAX_TABLE_VARS_LIMIT:
        raise argparse.ArgumentTypeError(f"must be between 1 and {MAX_TABLE_VARS_LIMIT}")
    return value


def build_arg_parser():
    ap = argparse.ArgumentParser(
        prog='ttgen',
        description="Print the truth table of each boolean expression read, one expression per line.",
        epilog="Operators: NOT (!), AND (&), OR (|), XOR (^), NAND, NOR, IMPLIES (->), EQUIV (=). "
               "A line starting with '/' followed by variable names fixes the column order.",
    )
    ap.add_argument('files', nargs='*', metavar='FILE',
                    help="input files, '-' or nothing for standard input")
    ap.add_argument('--digits', action='store_true',
                    help="print 0/1 instead of F/T")
    ap.add_argument('--max-vars', type=max_vars_arg, default=DEFAULT_MAX_TABLE_VARS, metavar='N',
                    help=f"refuse tables with more than N variables (default {DEFAULT_MAX_TABLE_VARS})")
    ap.add_argument('--no-header', dest='show_header', action='store_false',
                    help="do not print the variable names above each table")
    ap.add_argument('-v', '--verbose', action='store_true',
                    help="log tokens and postfix programs to standard error")
    ap.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    return ap


def main(argv=None):
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = Config(
        alphabet=ALPHABETS['digits' if args.digits else 'letters'],
        max_table_vars=args.max_vars,
        show_header=args.show_header,
    )
    session = Session(config)

    try:
        for name in args.files or ['-']:
            if name == '-':
                session.run(sys.stdin, '<stdin>')
                continue
            try:
                with open(name, encoding='utf-8', errors='surrogateescape') as file:
                    session.run(file, name)
            except OSError as error:
                print(f"ttgen: {name}: {error.strerror}", file=sys.stderr)
                return 2
    except VariableCapacityError as error:
        sys.stdout.flush()
        print(f"error: {error}", file=sys.stderr)
        return 1

    log.debug("%d line(s) rejected", session.errors)
    return 0


if __name__ == '__main__':
    sys.exit(main())
