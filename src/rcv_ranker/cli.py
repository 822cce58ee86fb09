"""
Module that contains the command line app.

Why does this file exist, and why not put this in __main__?

  You might be tempted to import things from __main__ later, but that will cause
  problems: the code will get executed twice:

  - When you run `python -mrcv_ranker` python will execute
    ``__main__.py`` as a script. That means there won't be any
    ``rcv_ranker.__main__`` in ``sys.modules``.
  - When you import __main__ it will get executed again (as a module) because
    there's no ``rcv_ranker.__main__`` in ``sys.modules``.
"""
import argparse
import logging
import os
import pathlib

import tqdm

import rcv_ranker.election as election
import rcv_ranker.parsers as parsers
import rcv_ranker.write_out as write_out

logger = logging.getLogger(__name__)


def make_parser():

    p = argparse.ArgumentParser(description='Rank candidates of instant-runoff elections. '
                                'Prints each place in order, and optionally writes result tables.')

    p.add_argument('ballot_paths', nargs='+', help='Paths to ballot files, one election per path.')
    p.add_argument('--parser', default='rank_column_csv', choices=sorted(parsers.get_parser_dict()),
                   help='Parser used to read each ballot path (default: rank_column_csv).')
    p.add_argument('--output-dir', help='Directory to write placement tables to. Nothing is written if omitted.')
    p.add_argument('--rounds', action='store_true',
                   help='Also write round by round tables (csv and json). Requires --output-dir.')
    p.add_argument('--approximate-max-rank', action='store_true',
                   help='Decrease the tie-break rank limit by one per elimination instead of recomputing it.')
    p.add_argument('-v', '--verbose', action='store_true', help='Log each round of the count.')

    return p


def main(argv=None):

    # argument parse and valid
    args = make_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')

    if args.rounds and not args.output_dir:
        raise RuntimeError('--rounds requires --output-dir')

    for path in args.ballot_paths:
        if not os.path.exists(path):
            raise RuntimeError(f'invalid path [ballot_path]: {path}')

    parser_func = parsers.get_parser_dict()[args.parser]

    for path in tqdm.tqdm(args.ballot_paths, disable=len(args.ballot_paths) < 2, colour='GREEN'):

        uid = pathlib.Path(path).stem
        logger.info('counting %s', path)

        ballot_dict = parser_func(path)
        counted = election.from_parsed(ballot_dict, exact_max_rank=not args.approximate_max_rank)

        placements = counted.get_placements()
        tqdm.tqdm.write(uid)
        for place, candidates in enumerate(placements, start=1):
            tqdm.tqdm.write(f'{place}\t{", ".join(candidates)}')

        if args.output_dir:
            write_out.write_placements(counted, args.output_dir, uid)
            if args.rounds:
                write_out.write_round_by_round_table(counted, args.output_dir, uid)
                write_out.write_round_by_round_json(counted, args.output_dir, uid)

    return(0)
