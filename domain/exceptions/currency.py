from enum import Enum


class CurrencyException(Exception):
	pass


class PolicyErrorKind(str, Enum):
	INVALID_AMOUNT = 'invalid_amount'
	INVALID_CURRENCY = 'invalid_currency'
	UNSUPPORTED_CURRENCY = 'unsupported_currency'
	INVALID_PAGINATION = 'invalid_pagination'
	INVALID_DATE_RANGE = 'invalid_date_range'
	RATE_UNAVAILABLE = 'rate_unavailable'


class PolicyError(CurrencyException):
	"""Request rejected by conversion or pagination rules."""

	def __init__(self, kind: PolicyErrorKind, message: str):
		super().__init__(message)
		self.kind = kind
		self.message = message


class ProviderError(CurrencyException):
	pass


class RatesNotFoundError(ProviderError):
	"""The provider answered, but has no rates for the requested currency or range."""


class UpstreamError(CurrencyException):
	"""The rate source failed; the original provider error is chained as __cause__."""

	def __init__(self, message: str = 'Exchange rate data unavailable'):
		super().__init__(message)
		self.message = message
