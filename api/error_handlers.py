import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.exceptions.currency import PolicyError, PolicyErrorKind, UpstreamError

logger = logging.getLogger(__name__)

POLICY_STATUS_CODES = {
	PolicyErrorKind.INVALID_AMOUNT: 400,
	PolicyErrorKind.INVALID_CURRENCY: 400,
	PolicyErrorKind.UNSUPPORTED_CURRENCY: 400,
	PolicyErrorKind.INVALID_PAGINATION: 400,
	PolicyErrorKind.INVALID_DATE_RANGE: 400,
	PolicyErrorKind.RATE_UNAVAILABLE: 404,
}


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(PolicyError)
	async def policy_error_handler(request: Request, exc: PolicyError):
		return JSONResponse(
			status_code=POLICY_STATUS_CODES.get(exc.kind, 400),
			content={'detail': exc.message},
		)

	@app.exception_handler(UpstreamError)
	async def upstream_error_handler(request: Request, exc: UpstreamError):
		logger.error(
			'Upstream error',
			extra={'path': request.url.path, 'cause': str(exc.__cause__)},
		)
		return JSONResponse(status_code=503, content={'detail': exc.message})

	@app.exception_handler(Exception)
	async def global_exception_handler(request: Request, exc: Exception):
		logger.error(f'Unhandled exception: {exc}', exc_info=True)
		return JSONResponse(status_code=500, content={'detail': 'Internal server error'})
