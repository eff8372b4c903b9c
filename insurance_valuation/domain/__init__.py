"""Domain types for the valuation engine."""

from insurance_valuation.domain.errors import ValidationError
from insurance_valuation.domain.types import Analysis
from insurance_valuation.domain.types import ComponentOutput
from insurance_valuation.domain.types import SCENARIO_NAMES
from insurance_valuation.domain.types import ScenarioSet
from insurance_valuation.domain.types import ValuationInput
from insurance_valuation.domain.types import ValuationResult

__all__ = [
    'Analysis',
    'ComponentOutput',
    'SCENARIO_NAMES',
    'ScenarioSet',
    'ValidationError',
    'ValuationInput',
    'ValuationResult',
]
