'''
Fulfillment adjustment.

Scales the aggregate value by insurer payment-reliability risk. The
relationship is inverse: a less reliable insurer raises the adjustment,
compensating the buyer for default risk.
'''

from insurance_valuation.components.base import ValueCalculator
from insurance_valuation.domain.types import ComponentOutput
from insurance_valuation.domain.types import ValuationInput

NEUTRAL_RATE = 0.5
SENSITIVITY = 0.3
MIN_ADJUSTMENT = 0.7


def fulfillment_adjustment(effective_rate: float) -> float:
  '''
  Adjustment multiplier for an effective fulfillment rate.

  Args:
    effective_rate: Fulfillment rate in [0, 1]

  Returns:
    1 + (0.5 - effective_rate) * 0.3, floored at 0.7
  '''
  return max(1 + (NEUTRAL_RATE - effective_rate) * SENSITIVITY,
             MIN_ADJUSTMENT)


class FulfillmentAdjuster(ValueCalculator):
  '''
  Uses the insurer's own fulfillment rate when known, else the industry
  average.
  '''

  def compute(self, inputs: ValuationInput) -> ComponentOutput[float]:
    if inputs.fulfillment_rate is not None:
      effective_rate = inputs.fulfillment_rate
      source = 'individual'
    else:
      effective_rate = inputs.industry_average_fulfillment
      source = 'industry_average'

    return ComponentOutput(value=fulfillment_adjustment(effective_rate),
                           diag={
                               'effective_rate': effective_rate,
                               'rate_source': source,
                           })
