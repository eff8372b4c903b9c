'''
Domain types for the valuation engine.

These frozen dataclasses are the typed interfaces between components:
calculators read a validated ValuationInput and never the raw request body,
and the composer assembles their outputs into a ValuationResult.

Attribute names are snake_case; to_dict() methods emit the camelCase names
used on the wire (contractPeriod, finalValue, ...).
'''

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Iterator, Optional, Tuple, TypeVar

T = TypeVar('T')

SCENARIO_NAMES: Tuple[str, ...] = ('optimistic', 'realistic', 'conservative')


@dataclass(frozen=True)
class ComponentOutput(Generic[T]):
  '''
  Standard output from any value calculator.

  Attributes:
    value: The computed value
    diag: Dictionary of diagnostic information
  '''
  value: T
  diag: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ValuationInput:
  '''
  Fully populated, validated valuation parameters for one policy.

  Built by ParameterValidator; never mutated. Scenario variants are derived
  with dataclasses.replace().

  Attributes:
    company: Insurer name
    product_name: Product name as sold
    product_category: Product family (e.g. 'Savings Plan')
    contract_period: Contract term in years
    paid_years: Years of premiums already paid
    annual_payment: Annual premium
    total_payment: Total premium over the whole term
    surrender_value: Cash payable if the policy is cancelled today
    market_interest_rate: Prevailing market interest rate (fraction)
    inflation_rate: Expected inflation (fraction)
    risk_free_rate: Risk-free rate (fraction)
    fulfillment_rate: Insurer's own payout fulfillment rate, if known
    industry_average_fulfillment: Fallback fulfillment rate
    time_value_multiplier: Value of one unused contract year
    psychological_barrier: Relief factor for not paying future premiums
    liquidity_premium: Liquidity premium tunable
    market_liquidity: Secondary-market liquidity (fraction)
    transaction_volume: Secondary-market transaction count
  '''
  company: str
  product_name: str
  product_category: str
  contract_period: int
  paid_years: int
  annual_payment: float
  total_payment: float
  surrender_value: float
  market_interest_rate: float
  inflation_rate: float
  risk_free_rate: float
  fulfillment_rate: Optional[float]
  industry_average_fulfillment: float
  time_value_multiplier: float
  psychological_barrier: float
  liquidity_premium: float
  market_liquidity: float
  transaction_volume: float

  @property
  def remaining_years(self) -> int:
    '''Unused contract years, floored at zero.'''
    return max(self.contract_period - self.paid_years, 0)

  def to_dict(self) -> Dict[str, Any]:
    '''Normalized echo of the input using wire names.'''
    return {
        'company': self.company,
        'productName': self.product_name,
        'productCategory': self.product_category,
        'contractPeriod': self.contract_period,
        'paidYears': self.paid_years,
        'annualPayment': self.annual_payment,
        'totalPayment': self.total_payment,
        'surrenderValue': self.surrender_value,
        'remainingYears': self.remaining_years,
        'marketInterestRate': self.market_interest_rate,
        'inflationRate': self.inflation_rate,
        'riskFreeRate': self.risk_free_rate,
        'fulfillmentRate': self.fulfillment_rate,
        'industryAverageFulfillment': self.industry_average_fulfillment,
        'timeValueMultiplier': self.time_value_multiplier,
        'psychologicalBarrier': self.psychological_barrier,
        'liquidityPremium': self.liquidity_premium,
        'marketLiquidity': self.market_liquidity,
        'transactionVolume': self.transaction_volume,
    }


@dataclass(frozen=True)
class Analysis:
  '''Descriptive text for each part of the valuation breakdown.'''
  time_value: str
  psychological_benefit: str
  market_opportunity: str
  risk_assessment: str

  def to_dict(self) -> Dict[str, str]:
    return {
        'timeValue': self.time_value,
        'psychologicalBenefit': self.psychological_benefit,
        'marketOpportunity': self.market_opportunity,
        'riskAssessment': self.risk_assessment,
    }


@dataclass(frozen=True)
class ValuationResult:
  '''
  Complete valuation breakdown for one input.

  Attributes:
    base_value: Valuation floor (the surrender value)
    time_premium: Value of unused contract years
    psychological_value: Premium-burden relief plus immediate liquidity
    market_value: Interest, inflation and liquidity market conditions
    adjusted_value: Sum of the above scaled by fulfillment_adjustment
    transaction_value: Market depth value
    liquidity_value: Liquidity share of adjusted_value
    final_value: adjusted_value + transaction_value + liquidity_value
    premium_rate: Uplift of final_value over base_value, in percent
    fulfillment_adjustment: Insurer reliability multiplier
    analysis: Descriptive strings for the breakdown
    diag: Merged diagnostics from all calculators
  '''
  base_value: float
  time_premium: float
  psychological_value: float
  market_value: float
  adjusted_value: float
  transaction_value: float
  liquidity_value: float
  final_value: float
  premium_rate: float
  fulfillment_adjustment: float
  analysis: Analysis
  diag: Dict[str, Any] = field(default_factory=dict)

  def to_dict(self) -> Dict[str, Any]:
    '''Full breakdown using wire names.'''
    return {
        'baseValue': self.base_value,
        'surrenderValue': self.base_value,
        'timePremium': self.time_premium,
        'psychologicalValue': self.psychological_value,
        'marketValue': self.market_value,
        'adjustedValue': self.adjusted_value,
        'transactionValue': self.transaction_value,
        'liquidityValue': self.liquidity_value,
        'finalValue': self.final_value,
        'premiumRate': self.premium_rate,
        'fulfillmentAdjustment': self.fulfillment_adjustment,
        'analysis': self.analysis.to_dict(),
    }


@dataclass(frozen=True)
class ScenarioSet:
  '''
  Valuation results for the three named scenarios.

  Supports lookup by name: scenarios['optimistic'].
  '''
  optimistic: ValuationResult
  realistic: ValuationResult
  conservative: ValuationResult

  def __getitem__(self, name: str) -> ValuationResult:
    if name not in SCENARIO_NAMES:
      raise KeyError(f"Unknown scenario: '{name}'. "
                     f'Available: {list(SCENARIO_NAMES)}')
    result: ValuationResult = getattr(self, name)
    return result

  def items(self) -> Iterator[Tuple[str, ValuationResult]]:
    '''Iterate (name, result) pairs in optimistic -> conservative order.'''
    for name in SCENARIO_NAMES:
      yield name, self[name]

  def summary(self) -> Dict[str, Dict[str, float]]:
    '''Caller-facing summary: final value and premium rate per scenario.'''
    return {
        name: {
            'finalValue': result.final_value,
            'premiumRate': result.premium_rate,
        } for name, result in self.items()
    }
