from dataclasses import dataclass

from broker_scraper.constants import (
    DEFAULT_CSV_PATH,
    DEFAULT_JSON_PATH,
    DEFAULT_LATITUDE,
    DEFAULT_LONGITUDE,
    DEFAULT_PAGE_SIZE,
    DEFAULT_RADIUS,
    PAGE_DELAY,
    REQUEST_TIMEOUT
)


def format_coordinate(value: str | float) -> str:
    if isinstance(value, str):
        return value.strip()
    return f'{value:.6f}'


@dataclass
class SearchConfig:
    latitude: str = DEFAULT_LATITUDE
    longitude: str = DEFAULT_LONGITUDE
    radius: str = DEFAULT_RADIUS
    page_size: int = DEFAULT_PAGE_SIZE
    json_path: str = DEFAULT_JSON_PATH
    csv_path: str = DEFAULT_CSV_PATH
    page_delay: float = PAGE_DELAY
    timeout: float = REQUEST_TIMEOUT

    def __post_init__(self):
        self.latitude = format_coordinate(self.latitude)
        self.longitude = format_coordinate(self.longitude)
        self.radius = str(self.radius)

        if self.page_size <= 0:
            raise ValueError(f'page_size must be positive, got {self.page_size}')
        if self.page_delay < 0:
            raise ValueError(f'page_delay cannot be negative, got {self.page_delay}')
        if self.timeout <= 0:
            raise ValueError(f'timeout must be positive, got {self.timeout}')
