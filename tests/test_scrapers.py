import json

import pytest

from broker_scraper.broker_dataclasses import Broker, Employment
from broker_scraper.exceptions import DecodeError
from broker_scraper.scrapers import BrokerSearchResultsPage

from conftest import broker_source


def _scrape(payload) -> object:
    return BrokerSearchResultsPage().scrape(json.dumps(payload))


def test_scrape_maps_wire_fields_to_brokers() -> None:
    page = _scrape({'took': 3, 'hits': {'total': 1, 'hits': [{'_id': 'x', '_source': broker_source(7)}]}})

    assert page.total == 1
    assert page.brokers == [
        Broker(
            id='1007',
            first_name='First7',
            last_name='Last7',
            employments=[Employment(firm_name='Firm 7', city='Washington', state='DC', zip='20001')],
        )
    ]


def test_missing_and_null_fields_become_empty() -> None:
    page = _scrape({'hits': {'total': 2, 'hits': [
        {'_source': {'ind_source_id': 42, 'ind_firstname': None}},
        {'_source': {'ind_source_id': '43', 'ind_current_employments': None}},
    ]}})

    first, second = page.brokers
    assert first.id == '42'
    assert first.first_name == ''
    assert first.last_name == ''
    assert first.employments == []
    assert second.employments == []
    assert second.first_employment == Employment()


def test_unknown_source_keys_are_ignored() -> None:
    source = broker_source(1)
    source['ind_bc_scope'] = 'Active'
    source['ind_current_employments'][0]['firm_id'] = '7691'

    page = _scrape({'hits': {'total': 1, 'hits': [{'_source': source}]}})

    assert page.brokers[0].first_employment.firm_name == 'Firm 1'


def test_broker_to_dict_uses_wire_names() -> None:
    broker = Broker(id='1', first_name='A', last_name='B', employments=[Employment(firm_name='F', city='C', state='S', zip='Z')])

    assert broker.to_dict() == {
        'ind_source_id': '1',
        'ind_firstname': 'A',
        'ind_lastname': 'B',
        'ind_current_employments': [
            {'firm_name': 'F', 'branch_city': 'C', 'branch_state': 'S', 'branch_zip': 'Z'}
        ],
    }


@pytest.mark.parametrize('content', [
    'not json',
    '[]',
    '{"error": "rate limited"}',
    '{"hits": []}',
    '{"hits": {"total": "many", "hits": []}}',
    '{"hits": {"total": 1, "hits": {}}}',
])
def test_malformed_bodies_raise_decode_error(content) -> None:
    with pytest.raises(DecodeError) as exc_info:
        BrokerSearchResultsPage().scrape(content)

    assert exc_info.value.body == content


@pytest.mark.parametrize('hits,expected', [
    ([None], [Broker()]),
    ([None, {'_source': broker_source(2)}], [Broker(), Broker(
        id='1002', first_name='First2', last_name='Last2',
        employments=[Employment(firm_name='Firm 2', city='Washington', state='DC', zip='20001')],
    )]),
    ([{'_source': None}], [Broker()]),
    ([{'_source': broker_source(3, employments=[None])}], [Broker(
        id='1003', first_name='First3', last_name='Last3', employments=[Employment()],
    )]),
    ([{'_source': broker_source(4, employments=[None, {'firm_name': 'Second'}])}], [Broker(
        id='1004', first_name='First4', last_name='Last4',
        employments=[Employment(), Employment(firm_name='Second')],
    )]),
])
def test_null_list_elements_decode_to_empty_records(hits, expected) -> None:
    page = _scrape({'hits': {'total': len(hits), 'hits': hits}})

    assert page.brokers == expected
    assert all(broker.first_employment is not None for broker in page.brokers)
