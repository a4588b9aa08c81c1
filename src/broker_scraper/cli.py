'''Click CLI entry point for the BrokerCheck scraper.'''

import logging

import click
import requests

from broker_scraper.broker_search import BrokerCheck
from broker_scraper.config import SearchConfig
from broker_scraper.constants import (
    DEFAULT_CSV_PATH,
    DEFAULT_JSON_PATH,
    DEFAULT_LATITUDE,
    DEFAULT_LONGITUDE,
    DEFAULT_PAGE_SIZE,
    DEFAULT_RADIUS,
    ENV_PREFIX,
    PAGE_DELAY,
    REQUEST_TIMEOUT
)
from broker_scraper.writers import CSVWriter, JSONWriter, save_all

logger = logging.getLogger(__name__)


def _env(name: str) -> str:
    return f'{ENV_PREFIX}_{name}'


@click.command()
@click.option('--lat', 'latitude', default=DEFAULT_LATITUDE, envvar=_env('LATITUDE'), show_default=True,
              help='Latitude of the search center')
@click.option('--lon', 'longitude', default=DEFAULT_LONGITUDE, envvar=_env('LONGITUDE'), show_default=True,
              help='Longitude of the search center')
@click.option('--radius', default=DEFAULT_RADIUS, envvar=_env('RADIUS'), show_default=True,
              help='Search radius in miles')
@click.option('--page-size', type=click.IntRange(min=1), default=DEFAULT_PAGE_SIZE, envvar=_env('PAGE_SIZE'),
              show_default=True, help='Results requested per page')
@click.option('--json-path', default=DEFAULT_JSON_PATH, envvar=_env('JSON_PATH'), show_default=True,
              type=click.Path(dir_okay=False), help='Where to write the JSON output')
@click.option('--csv-path', default=DEFAULT_CSV_PATH, envvar=_env('CSV_PATH'), show_default=True,
              type=click.Path(dir_okay=False), help='Where to write the CSV output')
@click.option('--delay', 'page_delay', type=click.FloatRange(min=0), default=PAGE_DELAY, envvar=_env('DELAY'),
              show_default=True, help='Seconds to wait between pages')
@click.option('--timeout', type=click.FloatRange(min=0, min_open=True), default=REQUEST_TIMEOUT,
              envvar=_env('TIMEOUT'), show_default=True, help='Per-request timeout in seconds')
@click.option('--verbose', '-v', is_flag=True, help='Print a summary of the run')
@click.option('--debug', is_flag=True, help='Debug logging')
def main(
    latitude: str,
    longitude: str,
    radius: str,
    page_size: int,
    json_path: str,
    csv_path: str,
    page_delay: float,
    timeout: float,
    verbose: bool,
    debug: bool
) -> None:
    '''Download every broker registered near a point from BrokerCheck.'''
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S',
    )

    config = SearchConfig(
        latitude=latitude,
        longitude=longitude,
        radius=radius,
        page_size=page_size,
        json_path=json_path,
        csv_path=csv_path,
        page_delay=page_delay,
        timeout=timeout
    )

    with requests.Session() as session:
        run = BrokerCheck(session).search(config)

    if run.aborted:
        logger.warning('Search stopped early, saving the %d brokers fetched so far.', len(run.brokers))

    saved = save_all(run.brokers, [JSONWriter(config.json_path), CSVWriter(config.csv_path)])

    if verbose:
        click.echo(f'Fetched {len(run.brokers)} brokers in {run.pages_fetched} pages')
        for path in saved:
            click.echo(f'  {path}')
