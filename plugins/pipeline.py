import logging
from datetime import date
from typing import Optional

from strategies.store.sqlite import StoreResult
from utils.date_utils import format_iso_date
from utils.strategy_factory import StrategyFactory

DEFAULT_WEBSITE = 'loxtonwaikerie.sa.gov.au'


def run_cycle(date_from: date, date_to: date, crawler, parser, store, scrape_date: str) -> int:
    """
    Fetch, extract and store the applications lodged in one date range.
    :return: the number of applications newly inserted into the store.
    """
    raw_data = crawler.crawl(date_from=date_from, date_to=date_to)
    development_applications = parser.parse(raw_data)

    logging.info(f'Inserting {len(development_applications)} development application(s) into the database.')
    inserted_count = 0
    for development_application in development_applications:
        development_application = development_application.stamp(
            information_url=crawler.information_url,
            comment_url=crawler.comment_url,
            scrape_date=scrape_date
        )
        if store.store(development_application) == StoreResult.INSERTED:
            inserted_count += 1

    logging.info(f'Inserted {inserted_count} new development application(s) '
                 f'lodged from {format_iso_date(date_from)} to {format_iso_date(date_to)}.')
    return inserted_count


def run(website: str = DEFAULT_WEBSITE, database: Optional[str] = None, today: Optional[date] = None,
        strategy_factory: Optional[StrategyFactory] = None) -> int:
    """
    Run both search cycles for a website: the last month, then one randomly chosen earlier month.
    :param website: the website key in mapping.json.
    :param database: path of the sqlite database, defaults to the one in mapping.json.
    :param today: the date of the scrape, defaults to the current date.
    :param strategy_factory: the factory used to load the strategies.
    :return: the total number of applications newly inserted.
    """
    strategy_factory = strategy_factory or StrategyFactory()
    scraper = strategy_factory.get_scraper(website)
    name = scraper['name']
    today = today or date.today()

    source = strategy_factory.get_strategy('source', name)
    crawler = strategy_factory.get_strategy('crawl', name)
    parser = strategy_factory.get_strategy('parse', name)
    store = strategy_factory.get_strategy('store', scraper.get('store', 'sqlite'),
                                          database=database or scraper.get('database', 'data.sqlite'))

    total_inserted = 0
    try:
        for date_from, date_to in source.get_sources(today=today):
            total_inserted += run_cycle(date_from, date_to, crawler, parser, store, format_iso_date(today))
    finally:
        store.close()

    return total_inserted
