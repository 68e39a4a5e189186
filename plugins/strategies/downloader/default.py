import logging
import os

import requests
import urllib3
from requests.exceptions import RequestException, Timeout, HTTPError

from strategies.base.download_strategy import DownloadStrategy


urllib3.disable_warnings()


class DefaultDownloader(DownloadStrategy):
    """
    Thin wrapper around a requests session. Errors are logged and re-raised, never retried.
    """
    proxy_environment_variable = 'MORPH_PROXY'

    def __init__(self, proxy=None, verify=False):
        self.requester = requests.Session()
        self.requester.verify = verify

        proxy = proxy or os.environ.get(self.proxy_environment_variable)
        if proxy:
            logging.info(f'Using proxy from {self.proxy_environment_variable}')
            self.requester.proxies = {
                'http': proxy,
                'https': proxy,
            }

    def download(self, url, headers=None, cookies=None, timeout=100) -> requests.Response:
        try:
            response = self.requester.get(url, timeout=timeout, headers=headers, cookies=cookies)
            response.raise_for_status()

        except Timeout:
            logging.error(f'Timeout occurred while downloading {url}')
            raise
        except HTTPError as e:
            logging.error(f'HTTP Error {e.response.status_code} occurred for {url}')
            raise
        except RequestException as e:
            logging.error(f'An error occurred while downloading {url}: {e}')
            raise

        return response

    def close(self):
        self.requester.close()
