"""
Range checks for sampling parameters.

Checks run in a fixed order and the first failure wins, so a caller that
passes several bad values always sees the same error.
"""

from __future__ import annotations

from review_gpt.llm_adapter.errors import (
    InvalidBestOfError,
    InvalidFrequencyPenaltyError,
    InvalidModelError,
    InvalidPresencePenaltyError,
    InvalidTemperatureError,
    InvalidTopPError,
)
from review_gpt.llm_adapter.models import SamplingParameters

TEMPERATURE_RANGE = (0.0, 1.0)
TOP_P_RANGE = (0.0, 1.0)
PRESENCE_RANGE = (-2.0, 2.0)
FREQUENCY_RANGE = (-2.0, 2.0)
BEST_OF_RANGE = (1, 20)


def _in_range(value: float, bounds: tuple[float, float]) -> bool:
    # Written as a positive check so NaN falls outside every range.
    return bounds[0] <= value <= bounds[1]


def validate(params: SamplingParameters, model_found: bool, alias: str = "") -> None:
    """Raise the first ParameterError that applies, or return None."""
    if not model_found:
        raise InvalidModelError(alias)
    if not _in_range(params.temperature, TEMPERATURE_RANGE):
        raise InvalidTemperatureError(params.temperature, *TEMPERATURE_RANGE)
    if not _in_range(params.top_p, TOP_P_RANGE):
        raise InvalidTopPError(params.top_p, *TOP_P_RANGE)
    if not _in_range(params.presence_penalty, PRESENCE_RANGE):
        raise InvalidPresencePenaltyError(params.presence_penalty, *PRESENCE_RANGE)
    if not _in_range(params.frequency_penalty, FREQUENCY_RANGE):
        raise InvalidFrequencyPenaltyError(params.frequency_penalty, *FREQUENCY_RANGE)
    if not _in_range(params.best_of, BEST_OF_RANGE):
        raise InvalidBestOfError(params.best_of, *BEST_OF_RANGE)
