'''
Time premium calculator.

Each unused contract year carries a time value that compounds at a fixed 5%
a year. The psychological barrier inflates it for the relief of not having
to keep paying.
'''

from insurance_valuation.components.base import ValueCalculator
from insurance_valuation.domain.types import ComponentOutput
from insurance_valuation.domain.types import ValuationInput

ANNUAL_COMPOUNDING = 1.05


class TimePremiumCalculator(ValueCalculator):
  '''
  timePremium = remainingYears * timeValueMultiplier
                * (1 + psychologicalBarrier) * 1.05 ** remainingYears
  '''

  def compute(self, inputs: ValuationInput) -> ComponentOutput[float]:
    '''Compute the compounded value of unused contract years.'''
    years = inputs.remaining_years
    time_value = (years * inputs.time_value_multiplier *
                  (1 + inputs.psychological_barrier))
    compound_effect = ANNUAL_COMPOUNDING**years

    return ComponentOutput(
        value=time_value * compound_effect,
        diag={
            'remaining_years': years,
            'time_value': time_value,
            'compound_effect': compound_effect,
        })
