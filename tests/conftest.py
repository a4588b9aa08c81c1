import json

import pytest
import requests


class FakeResponse:
    def __init__(self, payload=None, status_code: int = 200, text: str | None = None,
                 url: str = 'https://api.brokercheck.finra.org/search/individual'):
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(payload)
        self.url = url


class StubSession:
    '''Hands out queued responses, or raises queued exceptions, one per GET.'''

    def __init__(self, responses: list):
        self._responses = list(responses)
        self.calls: list[dict] = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({'url': url, 'params': params, 'headers': headers, 'timeout': timeout})
        if not self._responses:
            raise AssertionError(f'unexpected request with params {params}')
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def offsets(self) -> list[int]:
        return [int(call['params']['start']) for call in self.calls]


def broker_source(n: int, employments: list[dict] | None = None) -> dict:
    return {
        'ind_source_id': str(1000 + n),
        'ind_firstname': f'First{n}',
        'ind_lastname': f'Last{n}',
        'ind_current_employments': employments if employments is not None else [
            {
                'firm_name': f'Firm {n}',
                'branch_city': 'Washington',
                'branch_state': 'DC',
                'branch_zip': '20001',
            }
        ],
    }


def search_page(total: int, start: int, count: int) -> FakeResponse:
    hits = [{'_source': broker_source(n)} for n in range(start, start + count)]
    return FakeResponse({'hits': {'total': total, 'hits': hits}})


@pytest.fixture
def stub_session():
    def make(*responses):
        return StubSession(list(responses))
    return make


@pytest.fixture
def connection_error():
    return requests.ConnectionError('connection refused')
