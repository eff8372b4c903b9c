'''
Secondary-market valuation engine for transferable insurance policies.

The engine turns policy facts (premiums paid, contract term, surrender value)
and market assumptions (interest, inflation, liquidity, insurer reliability)
into a valuation breakdown plus an optimistic/realistic/conservative band.
Each part of the value is computed by an independent calculator; a composer
combines them and a scenario analyzer re-runs the composer under fixed
multiplier perturbations.

Usage:
  from insurance_valuation import analyze_scenarios, evaluate_value

  result = evaluate_value(params)
  band = analyze_scenarios(params)
  print(result.final_value, band.summary())
'''

from insurance_valuation.domain.errors import ValidationError
from insurance_valuation.run import analyze_scenarios
from insurance_valuation.run import evaluate_value

__all__ = [
    'ValidationError',
    'analyze_scenarios',
    'evaluate_value',
]
