import logging
import sqlite3

import pytest

from models.development_application import NO_DESCRIPTION, DevelopmentApplication
from strategies.store.sqlite import SqliteStoreStrategy, StoreResult


def read_rows(database_path: str) -> list:
    connection = sqlite3.connect(database_path)
    try:
        return connection.execute('select * from [data] order by council_reference').fetchall()
    finally:
        connection.close()


@pytest.fixture
def store(database_path):
    store = SqliteStoreStrategy(database=database_path)
    yield store
    store.close()


@pytest.fixture
def application() -> DevelopmentApplication:
    return DevelopmentApplication(
        application_number='2019/0045',
        address='12 Smith St, Loxton',
        description='Shed',
        information_url='https://eservices.loxtonwaikerie.sa.gov.au/eservice/daEnquiryInit.do?nodeNum=2811',
        comment_url='mailto:requests@waikerie.com',
        scrape_date='2019-04-15',
        received_date='2019-04-03'
    )


class TestSqliteStore:
    def test_creates_table_with_seven_columns(self, store, database_path):
        connection = sqlite3.connect(database_path)
        columns = [row[1] for row in connection.execute('pragma table_info([data])')]
        primary_keys = [row[1] for row in connection.execute('pragma table_info([data])') if row[5]]
        connection.close()

        assert columns == ['council_reference', 'address', 'description', 'info_url', 'comment_url',
                           'date_scraped', 'date_received']
        assert primary_keys == ['council_reference']

    def test_table_creation_is_idempotent(self, store, database_path, application):
        store.store(application)

        SqliteStoreStrategy(database=database_path).close()

        assert len(read_rows(database_path)) == 1

    def test_inserts_new_application(self, store, database_path, application):
        assert store.store(application) == StoreResult.INSERTED

        assert read_rows(database_path) == [application.to_row()]

    def test_existing_application_is_left_unchanged(self, store, database_path, application):
        store.store(application)
        changed = DevelopmentApplication(
            application_number='2019/0045',
            address='14 Other St, Waikerie',
            description='Carport',
            scrape_date='2019-05-01'
        )

        assert store.store(changed) == StoreResult.SKIPPED

        assert read_rows(database_path) == [application.to_row()]

    def test_placeholder_description_is_stored(self, store, database_path):
        store.store(DevelopmentApplication(application_number='2019/0046', address='1 Main St', description=''))

        assert read_rows(database_path)[0][2] == NO_DESCRIPTION

    def test_logs_inserted_and_skipped(self, store, application, caplog):
        with caplog.at_level(logging.INFO):
            store.store(application)
            store.store(application)

        assert 'Inserted: application "2019/0045" with address "12 Smith St, Loxton"' in caplog.text
        assert 'because it was already present in the database.' in caplog.text

    def test_write_errors_are_logged_and_raised(self, store, application, caplog):
        store.connection.execute('drop table [data]')

        with caplog.at_level(logging.ERROR):
            with pytest.raises(sqlite3.Error):
                store.store(application)

        assert 'store() error for application "2019/0045"' in caplog.text
