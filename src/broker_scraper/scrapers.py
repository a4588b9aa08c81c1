from abc import ABC, abstractmethod
import json
import logging

from broker_scraper.broker_dataclasses import BrokerSearchResponse
from broker_scraper.exceptions import DecodeError

logger = logging.getLogger(__name__)


class Scraper(ABC):
    @abstractmethod
    def scrape(self, content: str) -> any:
        ...


class BrokerSearchResultsPage(Scraper):

    def scrape(self, content: str) -> BrokerSearchResponse:
        data = self.__load(content)
        return self.__get_search_response(data, content)


    def __load(self, content: str) -> dict:
        try:
            data = json.loads(content)
        except ValueError as e:
            raise DecodeError(f'error unmarshaling JSON: {e}', body=content) from e

        if not isinstance(data, dict):
            raise DecodeError(f'expected a JSON object, got {type(data).__name__}', body=content)
        return data


    def __get_search_response(self, data: dict, content: str) -> BrokerSearchResponse:
        '''
        Only the shape of `hits` is checked; everything under `_source` is extracted
        best-effort and missing broker fields come back as empty strings.
        '''
        hits = data.get('hits')
        if not isinstance(hits, dict):
            raise DecodeError('response has no "hits" object', body=content)

        total = hits.get('total', 0)
        if isinstance(total, bool) or not isinstance(total, (int, type(None))):
            raise DecodeError(f'"hits.total" is not an integer: {total!r}', body=content)
        if not isinstance(hits.get('hits', []), (list, type(None))):
            raise DecodeError('"hits.hits" is not a list', body=content)

        try:
            response = BrokerSearchResponse.from_dict(data)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise DecodeError(f'unexpected search result shape: {e}', body=content) from e

        logger.debug('Decoded %d hits (total %d)', len(response.hits.hits), response.total)
        return response
