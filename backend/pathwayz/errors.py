from __future__ import annotations


class PathwayzError(Exception):
	"""Base error. Rendered by the API as {"error": error, "details": message}."""

	status_code = 500
	error = "internal_error"

	def __init__(self, message: str = "") -> None:
		super().__init__(message)
		self.message = message or self.error


class ValidationError(PathwayzError):
	status_code = 400
	error = "validation_error"


class NotFoundError(PathwayzError):
	status_code = 404
	error = "not_found"


# ---- Oracle failures: every kind is retryable by the caller ----

class OracleError(PathwayzError):
	error = "oracle_error"


class TransportError(OracleError):
	error = "oracle_transport_error"


class EmptyOutputError(OracleError):
	error = "oracle_empty_output"


class MalformedOutputError(OracleError):
	error = "oracle_malformed_output"


class SchemaError(OracleError):
	error = "oracle_schema_error"
