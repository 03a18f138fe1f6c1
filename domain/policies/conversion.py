from decimal import Decimal

from domain.exceptions.currency import PolicyError, PolicyErrorKind
from domain.models.currency import ConversionRequest, ConversionResult, ExchangeRate

EXCLUDED_CURRENCIES = frozenset({'TRY', 'PLN', 'THB', 'MXN'})

UNSUPPORTED_CURRENCY_MESSAGE = 'Currency conversion not supported for TRY, PLN, THB, and MXN.'


def validate_conversion(request: ConversionRequest) -> None:
	"""Reject excluded currencies and non-positive amounts.

	The rejection message for excluded currencies always lists the whole
	exclusion set, whichever side of the pair triggered it.
	"""
	if (
		request.from_currency.upper() in EXCLUDED_CURRENCIES
		or request.to_currency.upper() in EXCLUDED_CURRENCIES
	):
		raise PolicyError(PolicyErrorKind.UNSUPPORTED_CURRENCY, UNSUPPORTED_CURRENCY_MESSAGE)

	if not request.amount.is_finite() or request.amount <= 0:
		raise PolicyError(PolicyErrorKind.INVALID_AMOUNT, 'Amount must be greater than zero.')


def convert(request: ConversionRequest, rate_table: ExchangeRate) -> ConversionResult:
	if rate_table.base != request.from_currency:
		raise ValueError(
			f'Rate table base {rate_table.base} does not match {request.from_currency}'
		)

	if request.to_currency == request.from_currency:
		rate = Decimal(1)
	else:
		rate = rate_table.rates.get(request.to_currency)
		if rate is None:
			raise PolicyError(
				PolicyErrorKind.RATE_UNAVAILABLE,
				f'Exchange rate from {request.from_currency} to {request.to_currency} is not available.',
			)

	return ConversionResult(
		amount=request.amount,
		from_currency=request.from_currency,
		to_currency=request.to_currency,
		converted_amount=request.amount * rate,
		rate=rate,
		date=rate_table.date,
	)
