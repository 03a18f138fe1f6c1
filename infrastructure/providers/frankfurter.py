import logging
from datetime import date
from decimal import Decimal

import httpx
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from domain.exceptions.currency import ProviderError, RatesNotFoundError
from domain.models.currency import ExchangeRate, RateSeries

logger = logging.getLogger(__name__)


class FrankfurterProvider:
	BASE_URL = 'https://api.frankfurter.app'
	# Unknown currency codes come back as 404, unusable ranges as 422.
	NOT_FOUND_STATUSES = frozenset({404, 422})

	def __init__(
		self,
		base_url: str | None = None,
		client: httpx.AsyncClient | None = None,
		timeout: int = 10,
		max_attempts: int = 3,
		backoff: float = 1,
	):
		self.base_url = (base_url or self.BASE_URL).rstrip('/')
		self.max_attempts = max_attempts
		self.backoff = backoff
		self._client = client or httpx.AsyncClient(timeout=timeout)

	@property
	def name(self) -> str:
		return 'frankfurter'

	async def _get(self, url: str, params: dict) -> httpx.Response:
		# Only transport failures are retried; HTTP error statuses are final.
		async for attempt in AsyncRetrying(
			stop=stop_after_attempt(self.max_attempts),
			wait=wait_exponential(multiplier=self.backoff, max=10),
			retry=retry_if_exception_type(httpx.TransportError),
			reraise=True,
		):
			with attempt:
				return await self._client.get(url, params=params)

	async def _request(self, endpoint: str, params: dict) -> dict:
		url = f'{self.base_url}/{endpoint}'

		try:
			response = await self._get(url, params)
			response.raise_for_status()
			data = response.json()

			if 'rates' not in data:
				message = data.get('message', 'Unknown error')
				raise ProviderError(f'Frankfurter API error: {message}')

			return data

		except ProviderError:
			raise
		except httpx.HTTPStatusError as e:
			status_code = e.response.status_code
			logger.warning(
				'Frankfurter rejected request',
				extra={'provider': self.name, 'endpoint': endpoint, 'status_code': status_code},
			)
			if status_code in self.NOT_FOUND_STATUSES:
				raise RatesNotFoundError(
					f'Frankfurter has no rates for {endpoint} {params}: {e.response.text[:200]}'
				) from e
			raise ProviderError(
				f'Frankfurter HTTP error {status_code}: {e.response.text[:200]}'
			) from e
		except httpx.RequestError as e:
			logger.warning(
				'Frankfurter request failed',
				extra={'provider': self.name, 'endpoint': endpoint, 'error': e.__class__.__name__},
			)
			raise ProviderError(f'Frankfurter request failed: {e.__class__.__name__}') from e
		except Exception as e:
			raise ProviderError(f'Frankfurter response parsing error: {str(e)}') from e

	@staticmethod
	def _parse_rates(raw: dict) -> dict[str, Decimal]:
		return {code: Decimal(str(value)) for code, value in raw.items()}

	async def fetch_latest(self, base_currency: str) -> ExchangeRate:
		data = await self._request('latest', {'from': base_currency})
		try:
			return ExchangeRate(
				base=data['base'],
				date=date.fromisoformat(data['date']),
				rates=self._parse_rates(data['rates']),
			)
		except (KeyError, TypeError, ValueError, ArithmeticError) as e:
			raise ProviderError(f'Malformed Frankfurter payload for {base_currency}: {e}') from e

	async def fetch_range(self, base_currency: str, start: date, end: date) -> RateSeries:
		endpoint = f'{start.isoformat()}..{end.isoformat()}'
		data = await self._request(endpoint, {'from': base_currency})
		try:
			return RateSeries(
				base=data['base'],
				start_date=date.fromisoformat(data.get('start_date', start.isoformat())),
				end_date=date.fromisoformat(data.get('end_date', end.isoformat())),
				rates={
					date.fromisoformat(day): self._parse_rates(day_rates)
					for day, day_rates in data['rates'].items()
				},
			)
		except (KeyError, TypeError, ValueError, ArithmeticError, AttributeError) as e:
			raise ProviderError(f'Malformed Frankfurter payload for {base_currency}: {e}') from e

	async def close(self) -> None:
		await self._client.aclose()
