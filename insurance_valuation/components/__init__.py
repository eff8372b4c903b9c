"""
Value calculators for the valuation engine.

Each calculator monetizes one aspect of a transferable policy and returns
both a value and diagnostic information. All of them read the same
validated ValuationInput; the composer combines their outputs.

To add a new component:
1. Create a class inheriting from ValueCalculator
2. Implement compute() returning ComponentOutput
3. Wire it into ValuationComposer

Example:
  class MyComponent(ValueCalculator):
    def compute(self, inputs: ValuationInput) -> ComponentOutput[float]:
      value = ...  # your calculation
      return ComponentOutput(value=value, diag={'method': 'my_component'})
"""

from insurance_valuation.components.base import ValueCalculator
from insurance_valuation.components.fulfillment import fulfillment_adjustment
from insurance_valuation.components.fulfillment import FulfillmentAdjuster
from insurance_valuation.components.market import MarketValueCalculator
from insurance_valuation.components.psychological import PsychologicalValueCalculator
from insurance_valuation.components.time_premium import TimePremiumCalculator
from insurance_valuation.components.transaction import TransactionValueCalculator

__all__ = [
  'ValueCalculator',
  'TimePremiumCalculator',
  'PsychologicalValueCalculator',
  'MarketValueCalculator',
  'FulfillmentAdjuster', 'fulfillment_adjustment',
  'TransactionValueCalculator',
]
