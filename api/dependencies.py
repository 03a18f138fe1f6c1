import logging
from typing import Annotated

from fastapi import Depends

from application.services import ConversionService
from config.settings import get_settings
from infrastructure.providers import FrankfurterProvider, RateSource

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	rate_source: RateSource | None = None


deps = AppDependencies()


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.rate_source = FrankfurterProvider(
		base_url=settings.FRANKFURTER_BASE_URL,
		timeout=settings.PROVIDER_TIMEOUT,
		max_attempts=settings.PROVIDER_MAX_ATTEMPTS,
	)
	logger.info(f'Dependencies initialized (rate source: {deps.rate_source.name})')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.rate_source:
		await deps.rate_source.close()
		deps.rate_source = None

	logger.info('Cleanup complete')


def get_rate_source() -> RateSource:
	if deps.rate_source is None:
		raise RuntimeError('Rate source not initialized')
	return deps.rate_source


def get_conversion_service(
	rate_source: Annotated[RateSource, Depends(get_rate_source)],
) -> ConversionService:
	return ConversionService(rate_source=rate_source)
