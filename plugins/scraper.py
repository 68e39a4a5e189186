import argparse
import logging
import sys

import pipeline
from utils.strategy_factory import StrategyFactory


def parse_args(argv=None):
    arg_parser = argparse.ArgumentParser(description='Scrape development applications into a sqlite database.')
    arg_parser.add_argument('--website', default=pipeline.DEFAULT_WEBSITE,
                            help='website key in mapping.json')
    arg_parser.add_argument('--database', default=None,
                            help='path of the sqlite database, defaults to the one in mapping.json')
    arg_parser.add_argument('--log-level', default='INFO',
                            choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    return arg_parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format='%(asctime)s %(levelname)s %(message)s')

    try:
        pipeline.run(website=args.website, database=args.database, strategy_factory=StrategyFactory())
    except Exception as e:
        logging.exception(f'main() error: {str(e)}')
        return 1

    print('Complete.')
    return 0


if __name__ == '__main__':
    sys.exit(main())
