from lazylist import (
    lazy_list, list_range_by, iterate, cycle, take, sort_by, compare_values,
    to_list
)
from lazylist.sqrt import sqrt, relative_sqrt
from lazylist.errors import LazyListError
import argparse
import logging
import sys


logger = logging.getLogger('lazylist')

cli = argparse.ArgumentParser(
    description='Play with lazy and infinite linked lists',
    prog='lazylist'
)

cli.add_argument(
    '-v', '--verbose', help='enable debug logging',
    action='store_true'
)

commands = cli.add_subparsers(dest='command', required=True)

sqrt_cmd = commands.add_parser(
    'sqrt', help='square root by Newton-Raphson over an infinite list'
)
sqrt_cmd.add_argument('number', type=float)
sqrt_cmd.add_argument(
    '--guess', dest='a0', type=float, default=1.0,
    help='initial estimate [default: 1.0]'
)
sqrt_cmd.add_argument(
    '--eps', type=float, default=1e-10,
    help='tolerance between successive estimates [default: 1e-10]'
)
sqrt_cmd.add_argument(
    '--relative', action='store_true',
    help='treat the tolerance as relative to the estimate'
)

take_cmd = commands.add_parser(
    'take', help='print the first N values of a generated list'
)
take_cmd.add_argument('count', type=int)
generators = take_cmd.add_subparsers(dest='generator', required=True)

range_gen = generators.add_parser('range', help='START, START+STEP, ... up to END')
range_gen.add_argument('start', type=int)
range_gen.add_argument('end', type=int)
range_gen.add_argument(
    '--step', type=int, default=None,
    help='increment [default: 1 or -1, towards END]'
)

double_gen = generators.add_parser('iterate-double', help='SEED, 2*SEED, 4*SEED, ...')
double_gen.add_argument('seed', type=int)

cycle_gen = generators.add_parser('cycle', help='VALUES repeated forever')
cycle_gen.add_argument('values', nargs='*', type=int)

sort_cmd = commands.add_parser('sort', help='natural merge sort some integers')
sort_cmd.add_argument('values', nargs='*', type=int)
sort_cmd.add_argument(
    '-r', '--reverse', action='store_true',
    help='sort in descending order'
)


def generate(args):
    if args.generator == 'range':
        step = None if args.step is None else (lambda x: x + args.step)
        return list_range_by(args.start, args.end, step)
    if args.generator == 'iterate-double':
        return iterate(lambda x: x * 2, args.seed)
    return cycle(lazy_list(*args.values))


def main():
    args = cli.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    logger.debug(f'arguments: {vars(args)}')

    try:
        if args.command == 'sqrt':
            if args.number < 0:
                cli.error('cannot take the square root of a negative number')
            if args.a0 == 0:
                cli.error('initial guess must be non-zero')
            root = relative_sqrt if args.relative else sqrt
            print(root(args.number, args.a0, args.eps))
        elif args.command == 'take':
            print(*take(args.count, generate(args)))
        else:
            cmp = compare_values
            if args.reverse:
                cmp = lambda a, b: compare_values(a, b).invert()
            print(*to_list(sort_by(cmp, lazy_list(*args.values))))
    except LazyListError as err:
        print(f'lazylist: {err}', file=sys.stderr)
        return 1
    return 0

if __name__ == '__main__':
    sys.exit(main())
