import logging
import random
from datetime import date
from typing import List, Optional, Tuple

from strategies.base.source_strategy import SourceStrategy
from utils.date_utils import subtract_months

# The first recorded development application is in 2012.
FIRST_YEAR = 2012
FIRST_MONTH_INDEX = 1


class LoxtonwaikerieSaGovAuSourceStrategy(SourceStrategy):
    def get_sources(self, today: Optional[date] = None) -> List[Tuple[date, date]]:
        """
        Get the lodgement date ranges to search.
        The first range is the last month, the second is a randomly chosen earlier month
        so that applications missed by previous runs are eventually picked up.
        :param today: the date to count back from, defaults to the current date.
        :return: a list of (date_from, date_to) tuples.
        """
        today = today or date.today()
        sources = [(subtract_months(today, 1), today)]

        month_count = self.get_month_count(today)
        if month_count < 1:
            logging.warning(f'No earlier month to search before {today.isoformat()}')
            return sources

        random_month = random.randint(1, month_count)
        logging.info(f'Selected month {random_month} of {month_count} for the backfill search')
        sources.append((subtract_months(today, random_month + 1), subtract_months(today, random_month)))

        return sources

    @staticmethod
    def get_month_count(today: date) -> int:
        return today.year * 12 + (today.month - 1) - (FIRST_YEAR * 12 + FIRST_MONTH_INDEX)
