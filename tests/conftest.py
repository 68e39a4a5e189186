"""
Pytest configuration and shared fixtures.
"""

from datetime import date

import pytest


def build_application_block(address: str, rows: list, separator: str = '') -> str:
    """
    Render one heading and its details div the way the search results page does.
    The separator goes between every element, e.g. the newlines and indentation of the live page.
    """
    paragraphs = separator.join(
        f'<p class="rowDataOnly">{separator}<span class="key">{key}</span>{separator}'
        f'<span class="inputField">{value}</span>{separator}</p>'
        for key, value in rows
    )
    return (f'<h4 class="non_table_headers">{address}</h4>{separator}'
            f'<div>{separator}{paragraphs}{separator}</div>{separator}')


def build_results_page(*blocks: str) -> str:
    return f'<html><body><div id="fullcontent">{"".join(blocks)}</div></body></html>'


@pytest.fixture
def make_block():
    return build_application_block


@pytest.fixture
def make_page():
    return build_results_page


@pytest.fixture
def sample_rows() -> list:
    """Rows of a typical application on the search results page."""
    return [
        ('Type of Work', 'Shed'),
        ('Application No.', '2019/0045'),
        ('Date Lodged', '3/04/2019'),
    ]


@pytest.fixture
def sample_page(sample_rows) -> str:
    return build_results_page(build_application_block('12 Smith St, Loxton', sample_rows))


@pytest.fixture
def database_path(tmp_path) -> str:
    return str(tmp_path / 'data.sqlite')


@pytest.fixture
def scrape_day() -> date:
    return date(2019, 4, 15)
