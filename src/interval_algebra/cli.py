"""
Interval Algebra Command-Line Interface

Parses intervals written in interval notation and applies set or
arithmetic operations to them.

    interval-algebra show "[1, 5)"
    interval-algebra setop intersect "[1, 5]" "[3, 8]"
    interval-algebra arith mul "[-1, 1]" "[-1, 1]"
    interval-algebra sample "(0, 1]" --size 5
"""

import sys
import argparse
import json
import logging
from fractions import Fraction
from typing import Any, List

from .config import DEFAULT_EPSILON, DEFAULT_SAMPLE_MAX, DEFAULT_SAMPLE_MIN, SamplingConfig
from .errors import IntervalError
from .interval import Interval
from .notation import parse_interval
from .sampling import sample


logger = logging.getLogger(__name__)

SET_OPS = ['intersect', 'union', 'difference', 'complement', 'split']
ARITH_OPS = ['add', 'sub', 'mul', 'div', 'pow', 'nroot', 'abs', 'neg', 'reciprocal']
UNARY_OPS = {'complement', 'abs', 'neg', 'reciprocal'}


def _emit(result: Any, as_json: bool) -> None:
    """Print an interval, a list of intervals or a pair of intervals."""
    if isinstance(result, Interval):
        if as_json:
            print(json.dumps(result.to_canonical(), sort_keys=True, default=str))
        else:
            print(result)
        return

    items: List[Interval] = list(result)
    if as_json:
        print(json.dumps([i.to_canonical() for i in items], sort_keys=True, default=str))
    elif not items:
        print("(none)")
    else:
        for item in items:
            print(item)


def _require_rhs(args) -> str:
    if args.rhs is None:
        raise ValueError(f"'{args.op}' needs a second operand")
    return args.rhs


def cmd_show(args):
    """Parse and print a normalized interval."""
    _emit(parse_interval(args.interval), args.json)
    return 0


def cmd_setop(args):
    """Apply a set operation."""
    lhs = parse_interval(args.lhs)
    if args.op == 'complement':
        _emit(lhs.complement(), args.json)
        return 0
    if args.op == 'split':
        _emit(lhs.split(Fraction(_require_rhs(args))), args.json)
        return 0

    rhs = parse_interval(_require_rhs(args))
    if args.op == 'intersect':
        _emit(lhs & rhs, args.json)
    elif args.op == 'union':
        _emit(lhs | rhs, args.json)
    elif args.op == 'difference':
        _emit(lhs.difference(rhs), args.json)
    return 0


def cmd_arith(args):
    """Apply an arithmetic operation."""
    lhs = parse_interval(args.lhs)
    if args.op == 'abs':
        _emit(abs(lhs), args.json)
    elif args.op == 'neg':
        _emit(-lhs, args.json)
    elif args.op == 'reciprocal':
        _emit(lhs.reciprocal(), args.json)
    elif args.op == 'pow':
        _emit(lhs ** int(_require_rhs(args)), args.json)
    elif args.op == 'nroot':
        _emit(lhs.nroot(int(_require_rhs(args))), args.json)
    else:
        rhs = parse_interval(_require_rhs(args))
        if args.op == 'add':
            _emit(lhs + rhs, args.json)
        elif args.op == 'sub':
            _emit(lhs - rhs, args.json)
        elif args.op == 'mul':
            _emit(lhs * rhs, args.json)
        elif args.op == 'div':
            _emit(lhs / rhs, args.json)
    return 0


def cmd_sample(args):
    """Draw uniform samples from an interval."""
    interval = parse_interval(args.interval)
    config = SamplingConfig(
        epsilon=args.epsilon,
        min_value=args.min,
        max_value=args.max,
        seed=args.seed
    )
    values = sample(interval, size=args.size, config=config)
    if args.json:
        print(json.dumps([float(v) for v in values]))
    else:
        for v in values:
            print(f"{v:.6g}")
    return 0


def cmd_version(args):
    """Print version information."""
    from . import __version__
    print(f"interval-algebra {__version__}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='interval-algebra',
        description='Interval Algebra - set and arithmetic operations on intervals'
    )
    parser.add_argument('--json', action='store_true',
                        help='Print results as JSON')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Show command
    show_parser = subparsers.add_parser('show', help='Parse and normalize an interval')
    show_parser.add_argument('interval', help='Interval notation, e.g. "[1, 5)"')
    show_parser.set_defaults(func=cmd_show)

    # Set operation command
    set_parser = subparsers.add_parser('setop', help='Set operation on intervals')
    set_parser.add_argument('op', choices=SET_OPS, help='Operation')
    set_parser.add_argument('lhs', help='Left interval')
    set_parser.add_argument('rhs', nargs='?',
                            help='Right interval (split: the value to split at)')
    set_parser.set_defaults(func=cmd_setop)

    # Arithmetic command
    arith_parser = subparsers.add_parser('arith', help='Arithmetic on intervals')
    arith_parser.add_argument('op', choices=ARITH_OPS, help='Operation')
    arith_parser.add_argument('lhs', help='Left interval')
    arith_parser.add_argument('rhs', nargs='?',
                              help='Right interval (pow/nroot: an integer)')
    arith_parser.set_defaults(func=cmd_arith)

    # Sample command
    sample_parser = subparsers.add_parser('sample', help='Sample values from an interval')
    sample_parser.add_argument('interval', help='Interval notation')
    sample_parser.add_argument('--size', '-n', type=int, default=5,
                               help='Number of samples (default: 5)')
    sample_parser.add_argument('--seed', type=int, default=42,
                               help='Random seed (default: 42)')
    sample_parser.add_argument('--epsilon', '-e', type=float, default=DEFAULT_EPSILON,
                               help=f'Open endpoint nudge (default: {DEFAULT_EPSILON})')
    sample_parser.add_argument('--min', type=float, default=DEFAULT_SAMPLE_MIN,
                               help='Lower fallback for unbounded intervals')
    sample_parser.add_argument('--max', type=float, default=DEFAULT_SAMPLE_MAX,
                               help='Upper fallback for unbounded intervals')
    sample_parser.set_defaults(func=cmd_sample)

    # Version command
    ver_parser = subparsers.add_parser('version', help='Print version')
    ver_parser.set_defaults(func=cmd_version)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except (IntervalError, ValueError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
