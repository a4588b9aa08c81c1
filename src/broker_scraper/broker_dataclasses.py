from dataclasses import dataclass, field
from dataclasses_json import Undefined, config, dataclass_json


def _text(value) -> str:
    return '' if value is None else str(value)


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class Employment:
    firm_name: str = ''
    city: str = field(default='', metadata=config(field_name='branch_city'))
    state: str = field(default='', metadata=config(field_name='branch_state'))
    zip: str = field(default='', metadata=config(field_name='branch_zip'))

    def __post_init__(self):
        self.firm_name = _text(self.firm_name)
        self.city = _text(self.city)
        self.state = _text(self.state)
        self.zip = _text(self.zip)


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class Broker:
    id: str = field(default='', metadata=config(field_name='ind_source_id'))
    first_name: str = field(default='', metadata=config(field_name='ind_firstname'))
    last_name: str = field(default='', metadata=config(field_name='ind_lastname'))
    employments: list[Employment] = field(
        default_factory=list,
        metadata=config(field_name='ind_current_employments')
    )

    def __post_init__(self):
        self.id = _text(self.id)
        self.first_name = _text(self.first_name)
        self.last_name = _text(self.last_name)
        self.employments = [e or Employment() for e in self.employments or []]

    @property
    def first_employment(self) -> Employment:
        return self.employments[0] if self.employments else Employment()


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class BrokerHit:
    source: Broker = field(default_factory=Broker, metadata=config(field_name='_source'))

    def __post_init__(self):
        self.source = self.source or Broker()


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class BrokerHits:
    total: int = 0
    hits: list[BrokerHit] = field(default_factory=list)

    def __post_init__(self):
        self.total = self.total or 0
        self.hits = [hit or BrokerHit() for hit in self.hits or []]


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class BrokerSearchResponse:
    hits: BrokerHits = field(default_factory=BrokerHits)

    @property
    def total(self) -> int:
        return self.hits.total

    @property
    def brokers(self) -> list[Broker]:
        return [hit.source for hit in self.hits.hits]
