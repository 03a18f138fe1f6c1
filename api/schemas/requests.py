from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

CURRENCY_CODE_PATTERN = r'^[A-Za-z]{3}$'


class ConversionRequest(BaseModel):
	from_currency: str = Field(..., pattern=CURRENCY_CODE_PATTERN)
	to_currency: str = Field(..., pattern=CURRENCY_CODE_PATTERN)
	# Positivity is a conversion rule, reported as 400 rather than 422.
	amount: Decimal

	@field_validator('from_currency', 'to_currency')
	@classmethod
	def uppercase_currency(cls, v: str):
		return v.upper()

	model_config = {
		'json_schema_extra': {
			'example': {'from_currency': 'EUR', 'to_currency': 'USD', 'amount': 100.00}
		}
	}
