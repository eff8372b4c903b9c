"""Validation of raw valuation parameters."""

from insurance_valuation.validation.params import ParameterValidator
from insurance_valuation.validation.params import REQUIRED_FIELDS
from insurance_valuation.validation.schemas import ValuationRequest

__all__ = [
    'ParameterValidator',
    'REQUIRED_FIELDS',
    'ValuationRequest',
]
