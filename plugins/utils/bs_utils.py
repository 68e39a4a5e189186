import re

from bs4 import BeautifulSoup


def clean_text(text: str) -> str:
    """
    Trim the text and reduce every run of two or more whitespace characters to a single space.
    :param text: text to be cleaned
    :return: the cleaned text
    """
    if not text:
        return ''

    return re.sub(r'\s\s+', ' ', text.strip())


def get_child_text(tag, name: str, class_name: str) -> str:
    """
    :param tag: BeautifulSoup tag
    :param name: tag name of the direct children to read, e.g. 'span'
    :param class_name: class the direct children must have
    :return: Returns the stripped text of every matching child joined together.
    """
    if not tag:
        return ''

    children = tag.find_all(name, class_=class_name, recursive=False)
    return ''.join(child.get_text() for child in children).strip()


def get_soup(data) -> BeautifulSoup:
    if isinstance(data, BeautifulSoup):
        return data

    return BeautifulSoup(data or '', 'lxml')
