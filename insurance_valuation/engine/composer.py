"""
Valuation composer.

Combines the independent calculator outputs into the full valuation
breakdown. Pure: the same ValuationInput always yields an equal
ValuationResult.

  baseValue      = surrenderValue
  adjustedValue  = (baseValue + timePremium + psychologicalValue
                    + marketValue) * fulfillmentAdjustment
  liquidityValue = adjustedValue * 0.1
  finalValue     = adjustedValue + transactionValue + liquidityValue
  premiumRate    = (finalValue - baseValue) / baseValue * 100, or 0 when
                   baseValue is 0
"""

import logging
from typing import Any, Dict, Optional

from insurance_valuation.components.base import ValueCalculator
from insurance_valuation.components.fulfillment import FulfillmentAdjuster
from insurance_valuation.components.market import MarketValueCalculator
from insurance_valuation.components.psychological import PsychologicalValueCalculator
from insurance_valuation.components.time_premium import TimePremiumCalculator
from insurance_valuation.components.transaction import TransactionValueCalculator
from insurance_valuation.domain.types import Analysis
from insurance_valuation.domain.types import ValuationInput
from insurance_valuation.domain.types import ValuationResult

logger = logging.getLogger(__name__)

LIQUIDITY_SHARE = 0.1


def compute_premium_rate(final_value: float, base_value: float) -> float:
  """
  Percentage uplift of final_value over base_value.

  Returns 0.0 instead of a non-finite value when base_value is 0.
  """
  if base_value == 0:
    return 0.0
  return (final_value - base_value) / base_value * 100


def build_analysis(inputs: ValuationInput, time_premium: float,
                   psychological_value: float, market_value: float,
                   adjustment: float) -> Analysis:
  """Describe the breakdown in words, quoting the computed figures."""
  basis = ('individual' if inputs.fulfillment_rate is not None else
           'industry average')
  return Analysis(
      time_value=(f'Time premium: {time_premium:,.2f} '
                  f'({inputs.remaining_years} years remaining)'),
      psychological_benefit=(f'Psychological value: {psychological_value:,.2f} '
                             '(reduced premium burden)'),
      market_opportunity=(f'Market opportunity: {market_value:,.2f} '
                          '(interest/inflation protection)'),
      risk_assessment=(f'Fulfillment adjustment: {adjustment * 100:.1f}% '
                       f'({basis} basis)'),
  )


class ValuationComposer:
  """
  Runs every calculator on one input and aggregates the results.

  Calculators can be swapped for testing; defaults are the standard set.
  The composer keeps no state between calls.
  """

  def __init__(
      self,
      time_premium: Optional[ValueCalculator] = None,
      psychological: Optional[ValueCalculator] = None,
      market: Optional[ValueCalculator] = None,
      fulfillment: Optional[ValueCalculator] = None,
      transaction: Optional[ValueCalculator] = None,
  ):
    self.time_premium = time_premium or TimePremiumCalculator()
    self.psychological = psychological or PsychologicalValueCalculator()
    self.market = market or MarketValueCalculator()
    self.fulfillment = fulfillment or FulfillmentAdjuster()
    self.transaction = transaction or TransactionValueCalculator()

  def compose(self, inputs: ValuationInput) -> ValuationResult:
    """
    Compute the full valuation breakdown.

    Args:
      inputs: Validated valuation parameters

    Returns:
      ValuationResult with breakdown, analysis text and diagnostics
    """
    time_result = self.time_premium.compute(inputs)
    psych_result = self.psychological.compute(inputs)
    market_result = self.market.compute(inputs)
    fulfillment_result = self.fulfillment.compute(inputs)
    transaction_result = self.transaction.compute(inputs)

    diag: Dict[str, Any] = {}
    for prefix, output in (
        ('time', time_result),
        ('psychological', psych_result),
        ('market', market_result),
        ('fulfillment', fulfillment_result),
        ('transaction', transaction_result),
    ):
      diag.update({f'{prefix}_{k}': v for k, v in output.diag.items()})

    base_value = inputs.surrender_value
    adjustment = fulfillment_result.value
    adjusted_value = (base_value + time_result.value + psych_result.value +
                      market_result.value) * adjustment
    liquidity_value = adjusted_value * LIQUIDITY_SHARE
    final_value = adjusted_value + transaction_result.value + liquidity_value
    premium_rate = compute_premium_rate(final_value, base_value)

    logger.debug('%s / %s: final=%.2f premium=%.2f%%', inputs.company,
                 inputs.product_name, final_value, premium_rate)

    return ValuationResult(
        base_value=base_value,
        time_premium=time_result.value,
        psychological_value=psych_result.value,
        market_value=market_result.value,
        adjusted_value=adjusted_value,
        transaction_value=transaction_result.value,
        liquidity_value=liquidity_value,
        final_value=final_value,
        premium_rate=premium_rate,
        fulfillment_adjustment=adjustment,
        analysis=build_analysis(inputs, time_result.value, psych_result.value,
                                market_result.value, adjustment),
        diag=diag,
    )
