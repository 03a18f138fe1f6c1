from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	FRANKFURTER_BASE_URL: str = 'https://api.frankfurter.app'
	PROVIDER_TIMEOUT: int = 10
	PROVIDER_MAX_ATTEMPTS: int = 3

	# Pagination
	DEFAULT_PAGE_SIZE: int = 10
	MAX_PAGE_SIZE: int = 100

	# Logging
	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False

	# Application
	APP_NAME: str = 'Currency Converter API'
	DEBUG: bool = False

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
