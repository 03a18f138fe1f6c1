from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from api.dependencies import get_conversion_service
from api.schemas.requests import CURRENCY_CODE_PATTERN
from api.schemas import (
	ConversionRequest,
	ConversionResponse,
	ExchangeRateResponse,
	HistoricalRatesPageResponse,
)
from application.services import ConversionService
from config.settings import get_settings
from domain.models import currency as models

settings = get_settings()

router = APIRouter(prefix='/api', tags=['currency'])


@router.get(
	'/rates/latest/{base_currency}',
	response_model=ExchangeRateResponse,
	status_code=status.HTTP_200_OK,
	summary='Get latest exchange rates',
)
async def get_latest_rates(
	base_currency: Annotated[str, Path(pattern=CURRENCY_CODE_PATTERN)],
	service: Annotated[ConversionService, Depends(get_conversion_service)],
) -> ExchangeRateResponse:
	result = await service.get_latest_rates(base_currency.upper())
	return ExchangeRateResponse.from_domain(result)


@router.post(
	'/convert',
	response_model=ConversionResponse,
	status_code=status.HTTP_200_OK,
	summary='Convert currency amount',
)
async def convert_currency(
	payload: ConversionRequest,
	service: Annotated[ConversionService, Depends(get_conversion_service)],
) -> ConversionResponse:
	request = models.ConversionRequest(
		amount=payload.amount,
		from_currency=payload.from_currency,
		to_currency=payload.to_currency,
	)
	result = await service.convert_currency(request)
	return ConversionResponse.from_domain(result)


@router.get(
	'/rates/historical/{base_currency}',
	response_model=HistoricalRatesPageResponse,
	status_code=status.HTTP_200_OK,
	summary='Get paginated historical exchange rates',
)
async def get_historical_rates(
	base_currency: Annotated[str, Path(pattern=CURRENCY_CODE_PATTERN)],
	start_date: Annotated[date, Query()],
	end_date: Annotated[date, Query()],
	service: Annotated[ConversionService, Depends(get_conversion_service)],
	page: Annotated[int, Query()] = 1,
	page_size: Annotated[int, Query(le=settings.MAX_PAGE_SIZE)] = settings.DEFAULT_PAGE_SIZE,
) -> HistoricalRatesPageResponse:
	request = models.HistoricalRatesRequest(
		base_currency=base_currency,
		start_date=start_date,
		end_date=end_date,
		page=page,
		page_size=page_size,
	)
	result = await service.get_historical_rates(request)
	return HistoricalRatesPageResponse.from_domain(result)
