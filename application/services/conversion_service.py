from collections.abc import Awaitable
from typing import TypeVar

from domain.exceptions.currency import (
	PolicyError,
	PolicyErrorKind,
	ProviderError,
	RatesNotFoundError,
	UpstreamError,
)
from domain.models.currency import (
	ConversionRequest,
	ConversionResult,
	ExchangeRate,
	HistoricalRatesRequest,
	HistoricalRatesResponse,
	normalize_currency_code,
)
from domain.policies.conversion import convert, validate_conversion
from domain.policies.pagination import paginate, validate_date_range, validate_pagination
from infrastructure.providers.base import RateSource

T = TypeVar('T')


class ConversionService:
	def __init__(self, rate_source: RateSource):
		self.rate_source = rate_source

	async def _fetch(self, call: Awaitable[T], base_currency: str) -> T:
		try:
			return await call
		except RatesNotFoundError as e:
			raise PolicyError(
				PolicyErrorKind.RATE_UNAVAILABLE,
				f'Exchange rates for {base_currency} are not available.',
			) from e
		except (ProviderError, TimeoutError) as e:
			raise UpstreamError() from e

	async def get_latest_rates(self, base_currency: str) -> ExchangeRate:
		base_currency = normalize_currency_code(base_currency)
		return await self._fetch(self.rate_source.fetch_latest(base_currency), base_currency)

	async def convert_currency(self, request: ConversionRequest) -> ConversionResult:
		validate_conversion(request)

		rate_table = await self._fetch(
			self.rate_source.fetch_latest(request.from_currency), request.from_currency
		)

		return convert(request, rate_table)

	async def get_historical_rates(self, request: HistoricalRatesRequest) -> HistoricalRatesResponse:
		validate_pagination(request.page, request.page_size)
		validate_date_range(request.start_date, request.end_date)

		series = await self._fetch(
			self.rate_source.fetch_range(request.base_currency, request.start_date, request.end_date),
			request.base_currency,
		)
		page = paginate(series, request.page, request.page_size)

		return HistoricalRatesResponse(
			base=series.base,
			start_date=series.start_date,
			end_date=series.end_date,
			rates=page.entries,
			page=page.page,
			page_size=page.page_size,
			total_entries=page.total_entries,
		)
