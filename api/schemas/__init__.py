from .requests import ConversionRequest
from .responses import (
	ConversionResponse,
	ExchangeRateResponse,
	HealthResponse,
	HistoricalRatesPageResponse,
	PaginationMeta,
)

__all__ = [
	'ConversionRequest',
	'ConversionResponse',
	'ExchangeRateResponse',
	'HealthResponse',
	'HistoricalRatesPageResponse',
	'PaginationMeta',
]
