"""
Business insight text for a completed valuation.

Every string is derived from the numeric fields of the input and result;
nothing here feeds back into the valuation.
"""

from typing import Dict

from insurance_valuation.domain.types import ValuationInput
from insurance_valuation.domain.types import ValuationResult


def build_business_insights(inputs: ValuationInput,
                            result: ValuationResult) -> Dict[str, str]:
  """
  Build seller/buyer-facing insight strings.

  Args:
    inputs: Validated input the result was computed from
    result: Valuation result for inputs

  Returns:
    Dictionary of insight name to sentence
  """
  if inputs.fulfillment_rate is not None:
    fulfillment_risk = (f'Individual fulfillment rate '
                        f'{inputs.fulfillment_rate * 100:.1f}% applied')
  else:
    fulfillment_risk = (f'Industry average fulfillment rate '
                        f'{inputs.industry_average_fulfillment * 100:.1f}% '
                        'applied')

  return {
      'timeValueProposition':
          (f'{inputs.remaining_years} remaining years valued at '
           f'{result.time_premium:,.2f}'),
      'psychologicalBenefit':
          (f'Psychological value of {result.psychological_value:,.2f} '
           'from reduced premium burden'),
      'marketOpportunity':
          (f'Market opportunity value of {result.market_value:,.2f} '
           '(interest/inflation protection)'),
      'liquidityAdvantage':
          (f'Immediate liquidity adds {result.liquidity_value:,.2f}'),
      'sellerBenefit':
          (f'Seller: {result.premium_rate:.1f}% premium over the '
           'surrender value'),
      'buyerBenefit':
          'Buyer: time premium reduces the remaining payment burden',
      'marketLiquidity':
          f'Market liquidity: {inputs.market_liquidity * 100:.0f}%',
      'fulfillmentRisk':
          fulfillment_risk,
      'riskAssessment':
          result.analysis.risk_assessment,
  }
