import logging
import sqlite3
from contextlib import closing
from enum import Enum

from models.development_application import DevelopmentApplication
from strategies.base.store_strategy import StoreStrategy

DEFAULT_DATABASE = 'data.sqlite'

CREATE_TABLE_SQL = (
    'create table if not exists [data] ([council_reference] text primary key, [address] text, '
    '[description] text, [info_url] text, [comment_url] text, [date_scraped] text, [date_received] text)'
)
INSERT_SQL = 'insert or ignore into [data] values (?, ?, ?, ?, ?, ?, ?)'


class StoreResult(Enum):
    INSERTED = 'inserted'
    SKIPPED = 'skipped'


class SqliteStoreStrategy(StoreStrategy):
    """
    Keeps development applications in a single sqlite table keyed by council reference.
    An application that is already present is left untouched.
    """

    def __init__(self, database: str = DEFAULT_DATABASE):
        self.database = database
        self.connection = sqlite3.connect(database)
        with self.connection:
            self.connection.execute(CREATE_TABLE_SQL)

    def store(self, development_application: DevelopmentApplication) -> StoreResult:
        summary = (f'application "{development_application.application_number}" '
                   f'with address "{development_application.address}", '
                   f'description "{development_application.description}" '
                   f'and received date "{development_application.received_date}"')
        try:
            with self.connection, closing(self.connection.cursor()) as cursor:
                cursor.execute(INSERT_SQL, development_application.to_row())
                inserted = cursor.rowcount > 0

        except sqlite3.Error as e:
            logging.error(f'store() error for application "{development_application.application_number}": {str(e)}')
            raise

        if inserted:
            logging.info(f'    Inserted: {summary} into the database.')
            return StoreResult.INSERTED

        logging.info(f'    Skipped: {summary} because it was already present in the database.')
        return StoreResult.SKIPPED

    def close(self):
        self.connection.close()
