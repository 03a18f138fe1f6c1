import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, Field

from domain.models.currency import ConversionResult, ExchangeRate, HistoricalRatesResponse


class ExchangeRateResponse(BaseModel):
	base: str = Field(..., description='Base currency code')
	date: dt.date = Field(..., description='As-of date of the rates')
	rates: dict[str, Decimal] = Field(..., description='Rates relative to the base currency')

	model_config = {
		'json_schema_extra': {
			'example': {'base': 'EUR', 'date': '2025-09-26', 'rates': {'USD': 1.1703, 'GBP': 0.8722}}
		}
	}

	@classmethod
	def from_domain(cls, rate: ExchangeRate) -> 'ExchangeRateResponse':
		return cls(base=rate.base, date=rate.date, rates=dict(rate.rates))


class ConversionResponse(BaseModel):
	from_currency: str = Field(..., description='Source currency code')
	to_currency: str = Field(..., description='Target currency code')
	amount: Decimal = Field(..., description='Original amount requested')
	converted_amount: Decimal = Field(..., description='Converted amount, unrounded')
	exchange_rate: Decimal = Field(..., description='Exchange rate used for conversion')
	date: dt.date = Field(..., description='As-of date of the rate used')

	model_config = {
		'json_schema_extra': {
			'example': {
				'from_currency': 'EUR',
				'to_currency': 'USD',
				'amount': 100.00,
				'converted_amount': 117.03,
				'exchange_rate': 1.1703,
				'date': '2025-09-26',
			}
		}
	}

	@classmethod
	def from_domain(cls, result: ConversionResult) -> 'ConversionResponse':
		return cls(
			from_currency=result.from_currency,
			to_currency=result.to_currency,
			amount=result.amount,
			converted_amount=result.converted_amount,
			exchange_rate=result.rate,
			date=result.date,
		)


class PaginationMeta(BaseModel):
	page: int
	page_size: int
	total_entries: int
	total_pages: int


class HistoricalRatesPageResponse(BaseModel):
	base: str = Field(..., description='Base currency code')
	start_date: dt.date
	end_date: dt.date
	rates: dict[dt.date, dict[str, Decimal]] = Field(..., description='Rates for the current page, by date')
	pagination: PaginationMeta

	@classmethod
	def from_domain(cls, response: HistoricalRatesResponse) -> 'HistoricalRatesPageResponse':
		return cls(
			base=response.base,
			start_date=response.start_date,
			end_date=response.end_date,
			rates={day: dict(day_rates) for day, day_rates in response.rates.items()},
			pagination=PaginationMeta(
				page=response.page,
				page_size=response.page_size,
				total_entries=response.total_entries,
				total_pages=response.total_pages,
			),
		)


class HealthResponse(BaseModel):
	status: str
	app: str
	timestamp: dt.datetime
