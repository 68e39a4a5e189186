from dataclasses import dataclass, replace

NO_DESCRIPTION = 'No Description Provided'


@dataclass(frozen=True)
class DevelopmentApplication:
    application_number: str
    address: str
    description: str = NO_DESCRIPTION
    information_url: str = ''
    comment_url: str = ''
    scrape_date: str = ''
    received_date: str = ''

    def __post_init__(self):
        if not self.description:
            object.__setattr__(self, 'description', NO_DESCRIPTION)

    def stamp(self, information_url: str, comment_url: str, scrape_date: str) -> 'DevelopmentApplication':
        """
        Fill in the values that are constant for a whole scrape.
        :param information_url: the portal URL the application was found on.
        :param comment_url: the address comments should be sent to.
        :param scrape_date: the date of the scrape as YYYY-MM-DD.
        :return: a copy of the application with those values set.
        """
        return replace(self, information_url=information_url, comment_url=comment_url, scrape_date=scrape_date)

    def to_row(self) -> tuple:
        return (
            self.application_number,
            self.address,
            self.description,
            self.information_url,
            self.comment_url,
            self.scrape_date,
            self.received_date,
        )
