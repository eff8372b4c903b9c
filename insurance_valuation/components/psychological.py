'''
Psychological value calculator.

Monetizes the buyer-side relief from future premium obligations plus the
seller's immediate access to cash.
'''

from insurance_valuation.components.base import ValueCalculator
from insurance_valuation.domain.types import ComponentOutput
from insurance_valuation.domain.types import ValuationInput

# Share of the surrender value assumed realizable immediately.
IMMEDIATE_LIQUIDITY_RATIO = 0.8


class PsychologicalValueCalculator(ValueCalculator):
  '''
  burdenReduction    = (contractPeriod - paidYears) * annualPayment
                       * psychologicalBarrier
  immediateLiquidity = surrenderValue * 0.8

  Uses the raw year difference rather than remaining_years, so an overpaid
  contract yields a negative burden reduction.
  '''

  def compute(self, inputs: ValuationInput) -> ComponentOutput[float]:
    remaining_burden = ((inputs.contract_period - inputs.paid_years) *
                        inputs.annual_payment)
    burden_reduction = remaining_burden * inputs.psychological_barrier
    immediate_liquidity = inputs.surrender_value * IMMEDIATE_LIQUIDITY_RATIO

    return ComponentOutput(
        value=burden_reduction + immediate_liquidity,
        diag={
            'remaining_burden': remaining_burden,
            'burden_reduction': burden_reduction,
            'immediate_liquidity': immediate_liquidity,
        })
