from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from itertools import islice
from types import MappingProxyType

from domain.exceptions.currency import PolicyError, PolicyErrorKind
from domain.models.currency import RateSeries


@dataclass(frozen=True)
class RatePage:
	entries: Mapping[date, Mapping[str, Decimal]]
	page: int
	page_size: int
	total_entries: int


def validate_pagination(page: int, page_size: int) -> None:
	if page <= 0 or page_size <= 0:
		raise PolicyError(
			PolicyErrorKind.INVALID_PAGINATION,
			'Page and page size must be positive integers.',
		)


def validate_date_range(start_date: date, end_date: date) -> None:
	if start_date > end_date:
		raise PolicyError(
			PolicyErrorKind.INVALID_DATE_RANGE,
			'Start date must not be after end date.',
		)


def paginate(series: RateSeries, page: int, page_size: int) -> RatePage:
	"""Slice a date-ordered series into a single page.

	A page past the end of the series is empty rather than an error.
	"""
	validate_pagination(page, page_size)

	offset = (page - 1) * page_size
	entries = dict(islice(series.rates.items(), offset, offset + page_size))

	return RatePage(
		entries=MappingProxyType(entries),
		page=page,
		page_size=page_size,
		total_entries=len(series),
	)
