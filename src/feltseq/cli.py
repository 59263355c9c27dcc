"""
feltseq command line

Usage:
    feltseq recover  0 1 1 2 3 5 8 13   [--seed N]
    feltseq charpoly 0 1 1 2 3 5 8 13   [--seed N]
    feltseq shamir   SECRET             [--threshold T] [--shares N] [--seed N]
    feltseq grocery  495 798 645 265    [--claim TOTAL]
"""

from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional, Sequence

from .field import FieldElement, elements
from .params import RecoveryParams, ShamirParams
from .berlekamp_massey import RecoveryError, recover, characteristic_polynomial
from .shamir import split_secret, recover_secret
from . import air


def _fmt(values: Sequence[FieldElement]) -> str:
    return ' '.join(str(v.to_signed()) for v in values)


def cmd_recover(args) -> int:
    rng = RecoveryParams(seed=args.seed).make_rng()
    c = recover(elements(args.values), rng)
    print(_fmt(c))
    return 0


def cmd_charpoly(args) -> int:
    rng = RecoveryParams(seed=args.seed).make_rng()
    c = recover(elements(args.values), rng)
    print(_fmt(characteristic_polynomial(c)))
    return 0


def cmd_shamir(args) -> int:
    params = ShamirParams(threshold=args.threshold, num_shares=args.shares)
    rng = RecoveryParams(seed=args.seed).make_rng()
    shares = split_secret(args.secret, params, rng)
    for x, y in shares:
        print(f"{x}\t{y}")
    print(f"recovered: {recover_secret(shares[:params.threshold])}")
    return 0


def cmd_grocery(args) -> int:
    trace = air.build_trace(args.costs)
    total = air.get_pub_inputs(trace)
    claim = FieldElement(args.claim) if args.claim is not None else total
    ok = air.verify(trace, claim)
    print(f"rows: {trace.num_rows}")
    print(f"total: {total}")
    print(f"verified: {ok}")
    return 0 if ok else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='feltseq',
        description='Linear recurrence recovery and friends over the Goldilocks field',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    feltseq recover 0 1 1 2 3 5 8 13       # -> 1 1
    feltseq charpoly 1 2 4 8 16            # -> 1 -2
    feltseq shamir 43253243242 --seed 7
    feltseq grocery 495 798 645 265 354 402
        """
    )
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')

    sub = parser.add_subparsers(dest='command', required=True)

    for name, func, text in (
        ('recover', cmd_recover, 'Shortest recurrence generating the sequence'),
        ('charpoly', cmd_charpoly, 'Minimal characteristic polynomial of the sequence'),
    ):
        p = sub.add_parser(name, help=text)
        p.add_argument('values', type=int, nargs='*', help='Sequence elements')
        p.add_argument('--seed', type=int, default=None, help='Bootstrap RNG seed')
        p.set_defaults(func=func)

    p = sub.add_parser('shamir', help='Split a secret and recover it from a threshold of shares')
    p.add_argument('secret', type=int)
    p.add_argument('--threshold', '-t', type=int, default=ShamirParams.threshold)
    p.add_argument('--shares', '-n', type=int, default=ShamirParams.num_shares)
    p.add_argument('--seed', type=int, default=None, help='Coefficient RNG seed')
    p.set_defaults(func=cmd_shamir)

    p = sub.add_parser('grocery', help='Build and check a grocery-list trace')
    p.add_argument('costs', type=int, nargs='+', help='Item prices')
    p.add_argument('--claim', type=int, default=None, help='Total to verify against (default: computed total)')
    p.set_defaults(func=cmd_grocery)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        return args.func(args)
    except (RecoveryError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
