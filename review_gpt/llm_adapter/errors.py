"""
Error taxonomy for the LLM adapter layer.

Parameter errors are raised before any network I/O. The remaining errors
map one-to-one onto the stages of a review call: encoding the request,
sending it, decoding the reply, and the API reporting a failure in the
payload itself.
"""

from __future__ import annotations


class ReviewGPTError(Exception):
    """Root of every error raised by the adapter."""


# ---------------------------------------------------------------------------
# Input validation
# ---------------------------------------------------------------------------


class ParameterError(ReviewGPTError):
    """A sampling parameter or the model alias was rejected."""


class InvalidModelError(ParameterError):
    def __init__(self, alias: str = "") -> None:
        self.alias = alias
        super().__init__(f"The model you entered was not correct: {alias!r}")


class _RangeError(ParameterError):
    parameter = ""

    def __init__(self, value: float, minimum: float, maximum: float) -> None:
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"The {self.parameter} is not in the correct range "
            f"({minimum} <= {self.parameter} <= {maximum}), got {value}"
        )


class InvalidTemperatureError(_RangeError):
    parameter = "temperature"


class InvalidTopPError(_RangeError):
    parameter = "top_p"


class InvalidPresencePenaltyError(_RangeError):
    parameter = "presence_penalty"


class InvalidFrequencyPenaltyError(_RangeError):
    parameter = "frequency_penalty"


class InvalidBestOfError(_RangeError):
    parameter = "best_of"


# ---------------------------------------------------------------------------
# Request / response lifecycle
# ---------------------------------------------------------------------------


class SerializationError(ReviewGPTError):
    """The request object could not be encoded as JSON."""


class TransportError(ReviewGPTError):
    """The HTTP call itself failed (connection, DNS, TLS, read)."""


class DecodeError(ReviewGPTError):
    """The response body did not decode into the expected shape."""


class UpstreamError(ReviewGPTError):
    """The API answered, but its payload carries an ``error`` object."""

    def __init__(
        self,
        message: str,
        type: str = "",
        code: str | None = None,
        param: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.type = type
        self.code = code
        self.param = param
