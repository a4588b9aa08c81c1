from dataclasses import dataclass, field
import logging
import time

import requests

from broker_scraper.broker_dataclasses import Broker, BrokerSearchResponse
from broker_scraper.config import SearchConfig
from broker_scraper.constants import API_URL, HEADERS
from broker_scraper.exceptions import BadStatusError, DecodeError, FetchError, TransportError
from broker_scraper.scrapers import BrokerSearchResultsPage, Scraper

logger = logging.getLogger(__name__)


class BrokerSearchQueryBuilder:
    __fixed_params: dict[str, str] = {
        'includePrevious': 'true',
        'hl': 'true',
        'sort': 'score desc',
        'wt': 'json',
    }

    def __init__(self):
        self.__params: dict[str, str] = {}
        self.__is_location_added: bool = False

    def location(self, latitude: str, longitude: str):
        if self.__is_location_added:
            raise RuntimeError('Can only call location once for each lookup.')

        self.__params['lat'] = latitude
        self.__params['lon'] = longitude
        self.__is_location_added = True
        return self

    def __validate_loc_added(self):
        if not self.__is_location_added:
            raise RuntimeError('location must be called before any other methods')

    def radius(self, radius: str):
        self.__validate_loc_added()
        self.__params['r'] = str(radius)
        return self

    def page_size(self, rows: int):
        self.__validate_loc_added()
        self.__params['nrows'] = str(rows)
        return self

    def start(self, offset: int):
        self.__validate_loc_added()
        if offset < 0:
            raise ValueError(f'offset cannot be negative, got {offset}')
        self.__params['start'] = str(offset)
        return self

    @property
    def params(self) -> dict[str, str]:
        self.__validate_loc_added()
        return {**self.__params, **self.__fixed_params}


class BrokerSearchFetcher:
    __headers = HEADERS

    def __init__(self, session: requests.Session, config: SearchConfig, scraper: Scraper | None = None):
        self.__session = session
        self.__config = config
        self.__scraper = scraper or BrokerSearchResultsPage()


    def fetch(self, offset: int) -> BrokerSearchResponse:
        params = BrokerSearchQueryBuilder() \
            .location(self.__config.latitude, self.__config.longitude) \
            .radius(self.__config.radius) \
            .page_size(self.__config.page_size) \
            .start(offset) \
            .params

        try:
            res = self.__session.get(
                API_URL,
                params=params,
                headers=self.__headers,
                timeout=self.__config.timeout
            )
        except requests.RequestException as e:
            raise TransportError(f'request for offset {offset} failed: {e}', offset=offset) from e

        if res.status_code != 200:
            raise BadStatusError(res.status_code, res.url, body=res.text, offset=offset)

        try:
            return self.__scraper.scrape(res.text)
        except DecodeError as e:
            e.offset = offset
            raise


@dataclass
class SearchRun:
    brokers: list[Broker] = field(default_factory=list)
    total: int | None = None
    pages_fetched: int = 0
    error: FetchError | None = None

    @property
    def aborted(self) -> bool:
        return self.error is not None

    @property
    def complete(self) -> bool:
        return self.error is None


class BrokerSearchResultsIterator:
    '''
    Walks the search results one page at a time. The total reported by the first
    successful page is kept for the whole run; a page with fewer hits than the page
    size always ends the walk, whatever that total says.
    '''

    def __init__(self, fetcher: BrokerSearchFetcher, config: SearchConfig):
        self.__fetcher = fetcher
        self.__page_size = config.page_size
        self.__page_delay = config.page_delay
        self.__page = 0
        self.__total_results_count: int | None = None
        self.__pages_fetched = 0
        self.__results: list[Broker] = []
        self.__error: FetchError | None = None
        self.__done = False


    @property
    def current_page(self) -> int:
        return self.__page


    @property
    def total(self) -> int | None:
        return self.__total_results_count


    def has_next_page(self) -> bool:
        if self.__done:
            return False
        if self.__total_results_count is not None and self.__offset() >= self.__total_results_count:
            return False
        return True


    def for_each(self, f: callable):
        for result in self.__results:
            f(result)


    def next_page(self) -> bool:
        if not self.has_next_page():
            self.__done = True
            return False

        offset = self.__offset()
        logger.info('Fetching page %d (starting at record %d)...', self.__page + 1, offset)

        try:
            response = self.__fetcher.fetch(offset)
        except FetchError as e:
            body = getattr(e, 'body', '')
            if body:
                logger.error('Error fetching page %d (offset %d): %s. Body: %.500s', self.__page + 1, offset, e, body)
            else:
                logger.error('Error fetching page %d (offset %d): %s', self.__page + 1, offset, e)
            self.__error = e
            self.__done = True
            return False

        self.__pages_fetched += 1

        if self.__total_results_count is None:
            self.__total_results_count = response.total
            if self.__total_results_count == 0:
                logger.info('API returned 0 total results.')
                self.__done = True
                return True
            logger.info('Found %d total results. Starting download...', self.__total_results_count)

        page_brokers = response.brokers
        self.__results.extend(page_brokers)

        if len(page_brokers) < self.__page_size:
            self.__done = True
        else:
            self.__page += 1
        return True


    def run(self) -> SearchRun:
        while self.next_page():
            if self.has_next_page():
                # Be polite, the API is meant for the BrokerCheck website.
                time.sleep(self.__page_delay)

        logger.info('Finished scraping. Found %d brokers.', len(self.__results))
        return self.result()


    def result(self) -> SearchRun:
        return SearchRun(
            brokers=list(self.__results),
            total=self.__total_results_count,
            pages_fetched=self.__pages_fetched,
            error=self.__error
        )


    def __offset(self) -> int:
        return self.__page * self.__page_size


class BrokerCheck:

    def __init__(self, session: requests.Session | None = None):
        self.__session = session


    def find(
        self,
        latitude: str | float,
        longitude: str | float,
        radius: str | int = None,
        page_size: int = None,
        page_delay: float = None,
        timeout: float = None
    ) -> SearchRun:
        overrides = {
            'radius': radius,
            'page_size': page_size,
            'page_delay': page_delay,
            'timeout': timeout,
        }
        config = SearchConfig(
            latitude=latitude,
            longitude=longitude,
            **{k: v for k, v in overrides.items() if v is not None}
        )
        return self.search(config)


    def search(self, config: SearchConfig) -> SearchRun:
        if self.__session is not None:
            return self.__run(self.__session, config)

        with requests.Session() as session:
            return self.__run(session, config)


    def __run(self, session: requests.Session, config: SearchConfig) -> SearchRun:
        logger.info('Starting scrape...')
        fetcher = BrokerSearchFetcher(session, config)
        return BrokerSearchResultsIterator(fetcher, config).run()
