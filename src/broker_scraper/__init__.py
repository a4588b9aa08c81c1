from broker_scraper.broker_search import BrokerCheck, BrokerSearchResultsIterator, SearchRun
from broker_scraper.config import SearchConfig

__all__ = ['BrokerCheck', 'BrokerSearchResultsIterator', 'SearchConfig', 'SearchRun']
