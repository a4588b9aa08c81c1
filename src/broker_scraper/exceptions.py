'''Errors raised while searching BrokerCheck and saving the results.'''


class BrokerScraperError(Exception):
    '''Base exception for all broker scraper errors.'''


class FetchError(BrokerScraperError):
    '''A page of search results could not be retrieved.'''

    def __init__(self, message: str, offset: int | None = None):
        super().__init__(message)
        self.offset = offset


class TransportError(FetchError):
    '''The request never produced a response (connection error, timeout).'''


class BadStatusError(FetchError):
    '''The API answered with a status code other than 200.'''

    def __init__(self, status_code: int, url: str, body: str = '', offset: int | None = None):
        super().__init__(f'bad status code: {status_code} for URL: {url}', offset)
        self.status_code = status_code
        self.url = url
        self.body = body


class DecodeError(FetchError):
    '''The response body was not a search results document.'''

    def __init__(self, message: str, body: str = '', offset: int | None = None):
        super().__init__(message, offset)
        self.body = body


class OutputError(BrokerScraperError):
    '''Failed to write an output file.'''

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path
