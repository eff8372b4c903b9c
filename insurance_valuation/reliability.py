'''
Insurer reliability reference tables.

Static per-insurer adjustment factors, payout reliability scores and
recommendation tiers, plus market trend notes per product category. The
engine never reads these tables: callers who want an insurer's score to
drive the valuation pass it in as fulfillmentRate via
with_insurer_reliability().
'''

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping

DEFAULT_ADJUSTMENT = 1.0
DEFAULT_RELIABILITY = 0.75

ADJUSTMENT_FACTORS: Dict[str, float] = {
    'AIA Group Limited': 1.15,
    'Prudential plc': 1.12,
    'Manulife Financial': 1.08,
    'Great Eastern Holdings': 1.05,
    'Sun Life Financial': 1.10,
    'FWD Group': 1.03,
    'Zurich Insurance Group': 1.07,
    'AXA': 1.06,
    'Generali': 1.05,
    'Allianz': 1.07,
    'HSBC Life': 1.06,
    'BOC Life': 1.04,
    'China Life Insurance': 1.03,
}

RELIABILITY_SCORES: Dict[str, float] = {
    'AIA Group Limited': 0.95,
    'Prudential plc': 0.92,
    'Manulife Financial': 0.90,
    'Great Eastern Holdings': 0.87,
    'Sun Life Financial': 0.89,
    'FWD Group': 0.85,
    'Zurich Insurance Group': 0.88,
    'AXA': 0.86,
    'Generali': 0.85,
    'Allianz': 0.87,
    'HSBC Life': 0.84,
    'BOC Life': 0.82,
    'China Life Insurance': 0.80,
}

PREMIUM_INSURERS = frozenset({
    'AIA Group Limited',
    'Prudential plc',
    'Manulife Financial',
    'Sun Life Financial',
    'Allianz',
})
CAUTION_INSURERS = frozenset({
    'FWD Group',
    'BOC Life',
    'China Life Insurance',
})

MARKET_TRENDS: Dict[str, List[str]] = {
    'Savings Plan': [
        'Hong Kong savings products showing steady growth',
        'Low interest environment favoring insurance savings',
        'Regulatory changes supporting consumer protection',
    ],
    'Pension Plan': [
        'Aging population driving pension demand',
        'Government incentives for retirement planning',
        'Cross-border portability gaining importance',
    ],
    'Investment Linked': [
        'Market volatility affecting returns',
        'ESG investments gaining traction',
        'Digital platforms improving accessibility',
    ],
    'Whole Life': [
        'Traditional products maintaining popularity',
        'Multi-generational wealth planning focus',
        'Enhanced riders expanding coverage',
    ],
}
DEFAULT_MARKET_TRENDS = [
    'Hong Kong insurance market remains stable',
    'Digital transformation accelerating',
    'Regulatory framework strengthening',
]

_CANONICAL_NAMES = {name.lower(): name for name in RELIABILITY_SCORES}


@dataclass(frozen=True)
class InsurerProfile:
  '''
  Reference data for one insurer.

  Attributes:
    name: Canonical insurer name (or the name as given when not listed)
    adjustment_factor: Relative market adjustment factor
    reliability_score: Historical payout fulfillment rate
    recommendation: 'premium', 'caution' or 'standard'
    listed: Whether the insurer appears in the tables
  '''
  name: str
  adjustment_factor: float
  reliability_score: float
  recommendation: str
  listed: bool

  def to_dict(self) -> Dict[str, Any]:
    return {
        'name': self.name,
        'adjustmentFactor': self.adjustment_factor,
        'reliabilityScore': self.reliability_score,
        'recommendation': self.recommendation,
        'listed': self.listed,
    }


def lookup_insurer(name: str) -> InsurerProfile:
  '''
  Look up an insurer by name (case-insensitive, exact).

  Unlisted insurers get the default factor and score and a 'standard'
  recommendation.
  '''
  canonical = _CANONICAL_NAMES.get(name.strip().lower())
  if canonical is None:
    return InsurerProfile(name=name.strip(),
                          adjustment_factor=DEFAULT_ADJUSTMENT,
                          reliability_score=DEFAULT_RELIABILITY,
                          recommendation='standard',
                          listed=False)

  if canonical in PREMIUM_INSURERS:
    recommendation = 'premium'
  elif canonical in CAUTION_INSURERS:
    recommendation = 'caution'
  else:
    recommendation = 'standard'

  return InsurerProfile(name=canonical,
                        adjustment_factor=ADJUSTMENT_FACTORS[canonical],
                        reliability_score=RELIABILITY_SCORES[canonical],
                        recommendation=recommendation,
                        listed=True)


def market_trends(product_category: str) -> List[str]:
  '''Market trend notes for a product category.'''
  return list(MARKET_TRENDS.get(product_category, DEFAULT_MARKET_TRENDS))


def with_insurer_reliability(params: Mapping[str, Any]) -> Dict[str, Any]:
  '''
  Copy raw parameters, filling fulfillmentRate from the insurer table.

  A caller-supplied fulfillmentRate always wins. Unlisted insurers are left
  alone so the industry average applies.

  Args:
    params: Raw valuation parameters (camelCase keys)

  Returns:
    New dictionary; params is not modified
  '''
  filled = dict(params)
  company = filled.get('company')
  if filled.get('fulfillmentRate') is not None or not isinstance(company, str):
    return filled

  profile = lookup_insurer(company)
  if profile.listed:
    filled['fulfillmentRate'] = profile.reliability_score
  return filled
