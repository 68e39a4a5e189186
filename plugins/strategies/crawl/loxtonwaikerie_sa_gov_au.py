import logging
import random
import time
from datetime import date
from urllib.parse import quote

from strategies.base.crawl_strategy import CrawlStrategy
from strategies.downloader.default import DefaultDownloader
from utils.date_utils import format_search_date

MAIN_URL = 'https://eservices.loxtonwaikerie.sa.gov.au/eservice/daEnquiryInit.do?nodeNum=2811'
SEARCH_URL = ('https://eservices.loxtonwaikerie.sa.gov.au/eservice/daEnquiry.do?number=&lodgeRangeType=on'
              '&dateFrom={date_from}&dateTo={date_to}&detDateFromString=&detDateToString=&streetName='
              '&suburb=0&unitNum=&houseNum=0%0D%0A%09%09%09%09%09&planNumber=&strataPlan=&lotNumber='
              '&propertyName=&searchMode=A&submitButton=Search')
COMMENT_URL = 'mailto:requests@waikerie.com'


class LoxtonwaikerieSaGovAuCrawlStrategy(CrawlStrategy):
    information_url = MAIN_URL
    comment_url = COMMENT_URL
    base_delay = 2000  # In milliseconds
    extra_delays = (0, 1000, 2000, 3000, 4000)  # In milliseconds

    def __init__(self, downloader_class=DefaultDownloader):
        self.downloader_class = downloader_class
        self.default_headers = {
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
            'Accept-Language': 'en-AU,en;q=0.9',
            'User-Agent': 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
                          '(KHTML, like Gecko) Chrome/115.0.0.0 Safari/537.36'
        }

    def crawl(self, date_from: date, date_to: date) -> str:
        """
        Get the search results page for applications lodged in a date range.
        :param date_from: first lodgement date of the search.
        :param date_to: last lodgement date of the search.
        :return: the HTML of the search results page.
        """
        downloader = self.downloader_class()
        try:
            # The landing page allocates the JSESSIONID_live cookie that the search requires.
            logging.info(f'Retrieving page: {MAIN_URL}')
            main_page_response = downloader.download(MAIN_URL, headers=self.default_headers)
            cookies = main_page_response.cookies

            self.pause()

            search_url = self.get_search_url(date_from, date_to)
            logging.info(f'Retrieving search results for: {search_url}')
            search_response = downloader.download(search_url, headers=self.default_headers, cookies=cookies)
        finally:
            downloader.close()

        return search_response.text

    def pause(self):
        delay = self.base_delay + random.choice(self.extra_delays)
        logging.info(f'Waiting {delay} ms before the search request')
        time.sleep(delay / 1000)

    @staticmethod
    def get_search_url(date_from: date, date_to: date) -> str:
        return SEARCH_URL.format(
            date_from=quote(format_search_date(date_from), safe=''),
            date_to=quote(format_search_date(date_to), safe='')
        )
