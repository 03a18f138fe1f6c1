import math
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from types import MappingProxyType

from domain.exceptions.currency import PolicyError, PolicyErrorKind

CURRENCY_CODE_PATTERN = re.compile(r'[A-Z]{3}')


def _normalize_code(code: str) -> str:
	normalized = code.strip().upper()
	if not CURRENCY_CODE_PATTERN.fullmatch(normalized):
		raise ValueError(f'Invalid currency code: {code!r}')
	return normalized


def normalize_currency_code(code: str) -> str:
	try:
		return _normalize_code(code)
	except ValueError as e:
		raise PolicyError(
			PolicyErrorKind.INVALID_CURRENCY,
			f'Invalid currency code: {code}. Expected a 3-letter code such as EUR.',
		) from e


def _normalize_rates(base: str, rates: Mapping[str, Decimal]) -> MappingProxyType:
	normalized = {}
	for code, rate in rates.items():
		code = _normalize_code(code)
		if code == base:
			continue
		if not rate.is_finite() or rate <= 0:
			raise ValueError(f'Rate for {code} must be positive, got {rate}')
		normalized[code] = rate
	return MappingProxyType(normalized)


@dataclass(frozen=True)
class ExchangeRate:
	base: str
	date: date
	rates: Mapping[str, Decimal] = field(default_factory=dict)

	def __post_init__(self):
		base = _normalize_code(self.base)
		object.__setattr__(self, 'base', base)
		object.__setattr__(self, 'rates', _normalize_rates(base, self.rates))


@dataclass(frozen=True)
class RateSeries:
	"""Rates for a base currency keyed by date, always in ascending date order."""

	base: str
	start_date: date
	end_date: date
	rates: Mapping[date, Mapping[str, Decimal]] = field(default_factory=dict)

	def __post_init__(self):
		base = _normalize_code(self.base)
		ordered = {
			day: _normalize_rates(base, day_rates) for day, day_rates in sorted(self.rates.items())
		}
		object.__setattr__(self, 'base', base)
		object.__setattr__(self, 'rates', MappingProxyType(ordered))

	def __len__(self) -> int:
		return len(self.rates)


@dataclass(frozen=True)
class ConversionRequest:
	amount: Decimal
	from_currency: str
	to_currency: str

	def __post_init__(self):
		object.__setattr__(self, 'from_currency', normalize_currency_code(self.from_currency))
		object.__setattr__(self, 'to_currency', normalize_currency_code(self.to_currency))


@dataclass(frozen=True)
class ConversionResult:
	amount: Decimal
	from_currency: str
	to_currency: str
	converted_amount: Decimal
	rate: Decimal
	date: date


@dataclass(frozen=True)
class HistoricalRatesRequest:
	base_currency: str
	start_date: date
	end_date: date
	page: int = 1
	page_size: int = 10

	def __post_init__(self):
		object.__setattr__(self, 'base_currency', normalize_currency_code(self.base_currency))


@dataclass(frozen=True)
class HistoricalRatesResponse:
	base: str
	start_date: date
	end_date: date
	rates: Mapping[date, Mapping[str, Decimal]]
	page: int
	page_size: int
	total_entries: int

	@property
	def total_pages(self) -> int:
		return math.ceil(self.total_entries / self.page_size)
