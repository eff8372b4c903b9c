'''Valuation composer combining calculator outputs.'''

from insurance_valuation.engine.composer import build_analysis
from insurance_valuation.engine.composer import compute_premium_rate
from insurance_valuation.engine.composer import ValuationComposer

__all__ = [
    'ValuationComposer',
    'build_analysis',
    'compute_premium_rate',
]
