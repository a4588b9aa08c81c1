from abc import ABC, abstractmethod
import csv
import json
import logging
from pathlib import Path

from broker_scraper.broker_dataclasses import Broker
from broker_scraper.exceptions import OutputError

logger = logging.getLogger(__name__)

CSV_HEADER = ['id', 'firstName', 'lastName', 'firmName', 'firmCity', 'firmState', 'firmZip']


class Writer(ABC):

    def __init__(self, path: str | Path):
        self.path = Path(path)

    @abstractmethod
    def write(self, brokers: list[Broker]) -> Path:
        ...


class JSONWriter(Writer):

    def write(self, brokers: list[Broker]) -> Path:
        data = [broker.to_dict() for broker in brokers]
        try:
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
                f.write('\n')
        except OSError as e:
            raise OutputError(f'Error writing JSON file {self.path}: {e}', str(self.path)) from e
        return self.path


class CSVWriter(Writer):
    '''
    One row per broker. Only the first current employment is flattened into the
    firm columns; any further employments are only kept in the JSON output.
    '''

    def write(self, brokers: list[Broker]) -> Path:
        try:
            with open(self.path, 'w', encoding='utf-8', newline='') as f:
                writer = csv.writer(f, lineterminator='\n')
                writer.writerow(CSV_HEADER)
                writer.writerows(self.__to_row(broker) for broker in brokers)
        except OSError as e:
            raise OutputError(f'Error writing CSV file {self.path}: {e}', str(self.path)) from e
        return self.path


    def __to_row(self, broker: Broker) -> list[str]:
        employment = broker.first_employment
        return [
            broker.id,
            broker.first_name,
            broker.last_name,
            employment.firm_name,
            employment.city,
            employment.state,
            employment.zip
        ]


def save_all(brokers: list[Broker], writers: list[Writer]) -> list[Path]:
    saved: list[Path] = []
    for writer in writers:
        try:
            saved.append(writer.write(list(brokers)))
        except OutputError as e:
            logger.error('%s', e)
            continue
        logger.info('Successfully saved to %s', writer.path)
    return saved
