'''
Transaction value calculator.

Monetizes market depth: deeper (higher-volume, more liquid) secondary markets
make a policy easier to trade.
'''

import math

from insurance_valuation.components.base import ValueCalculator
from insurance_valuation.domain.types import ComponentOutput
from insurance_valuation.domain.types import ValuationInput

VOLUME_WEIGHT = 0.1
LIQUIDITY_WEIGHT = 0.15


class TransactionValueCalculator(ValueCalculator):
  '''
  volumePremium    = ln(transactionVolume + 1) * 0.1
  liquidityPremium = marketLiquidity * 0.15
  '''

  def compute(self, inputs: ValuationInput) -> ComponentOutput[float]:
    volume_premium = math.log(inputs.transaction_volume + 1) * VOLUME_WEIGHT
    liquidity_premium = inputs.market_liquidity * LIQUIDITY_WEIGHT

    return ComponentOutput(value=volume_premium + liquidity_premium,
                           diag={
                               'volume_premium': volume_premium,
                               'liquidity_premium': liquidity_premium,
                           })
