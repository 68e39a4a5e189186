import logging

from models.development_application import DevelopmentApplication
from strategies.base.parse_strategy import ParseStrategy
from utils.bs_utils import clean_text, get_child_text, get_soup
from utils.date_utils import format_iso_date, parse_strict_date


class LoxtonwaikerieSaGovAuParseStrategy(ParseStrategy):
    header_selector = 'h4.non_table_headers'
    row_selector = 'p.rowDataOnly'

    description_key = 'Type of Work'
    application_number_key = 'Application No.'
    date_lodged_key = 'Date Lodged'

    def parse(self, raw_data) -> list:
        """
        Parse the development applications from the search results page.
        :param raw_data: the search results HTML, or a BeautifulSoup object of it.
        :return: a list of DevelopmentApplication, without the scrape-wide values filled in.
        """
        soup = get_soup(raw_data)
        development_applications = []

        for header_tag in soup.select(self.header_selector):
            development_application = self._parse_application(header_tag)
            if development_application:
                development_applications.append(development_application)

        return development_applications

    def _parse_application(self, header_tag):
        address = clean_text(header_tag.get_text())
        application_number = ''
        description = ''
        received_date = None

        details_tag = header_tag.find_next_sibling()
        if details_tag is not None and details_tag.name == 'div':
            for row_tag in details_tag.select(self.row_selector):
                key = get_child_text(row_tag, 'span', 'key')
                value = get_child_text(row_tag, 'span', 'inputField')

                if key == self.description_key:
                    description = value
                elif key == self.application_number_key:
                    application_number = value
                    logging.info(f'Found development application "{application_number}".')
                elif key == self.date_lodged_key:
                    received_date = parse_strict_date(value, 'D/MM/YYYY')

        if not application_number:
            return None

        if not address:
            logging.warning(f'Ignoring development application "{application_number}" because the address is blank.')
            return None

        return DevelopmentApplication(
            application_number=application_number,
            address=address,
            description=description,
            received_date=format_iso_date(received_date)
        )
