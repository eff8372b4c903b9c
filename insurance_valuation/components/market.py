'''
Market value calculator.

Monetizes prevailing market conditions: the spread of market interest over
the risk-free rate, protection against inflation on premiums paid, and the
liquidity of the secondary market.

Note: the interest differential is a bare rate difference added alongside
money amounts. It is kept as-is; rescaling it would move every valuation.
'''

from insurance_valuation.components.base import ValueCalculator
from insurance_valuation.domain.types import ComponentOutput
from insurance_valuation.domain.types import ValuationInput

INFLATION_PROTECTION_SHARE = 0.5


class MarketValueCalculator(ValueCalculator):
  '''
  interestDifferential = marketInterestRate - riskFreeRate
  inflationProtection  = totalPayment * inflationRate * 0.5
  liquidityValue       = surrenderValue * marketLiquidity
  '''

  def compute(self, inputs: ValuationInput) -> ComponentOutput[float]:
    interest_differential = (inputs.market_interest_rate -
                             inputs.risk_free_rate)
    inflation_protection = (inputs.total_payment * inputs.inflation_rate *
                            INFLATION_PROTECTION_SHARE)
    liquidity_value = inputs.surrender_value * inputs.market_liquidity

    return ComponentOutput(
        value=interest_differential + inflation_protection + liquidity_value,
        diag={
            'interest_differential': interest_differential,
            'interest_differential_unit': 'rate',
            'inflation_protection': inflation_protection,
            'market_liquidity_value': liquidity_value,
        })
