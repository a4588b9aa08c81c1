# Values taken from the Fetch/XHR requests the BrokerCheck website makes.
API_URL = 'https://api.brokercheck.finra.org/search/individual'

HEADERS = {
    'accept': 'application/json',
    'user-agent': 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/133.0.0.0 Safari/537.36',
}

# Washington D.C. area
DEFAULT_LATITUDE = '38.895568'
DEFAULT_LONGITUDE = '-77.026278'
DEFAULT_RADIUS = '25'  # miles
DEFAULT_PAGE_SIZE = 100  # the API rarely allows more

DEFAULT_JSON_PATH = 'brokers.json'
DEFAULT_CSV_PATH = 'brokers.csv'

PAGE_DELAY = 1.0  # seconds between pages
REQUEST_TIMEOUT = 10.0  # seconds

ENV_PREFIX = 'BROKER_SCRAPER'
