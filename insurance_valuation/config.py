"""
Default assumptions applied to optional valuation parameters.

ValuationDefaults is a serializable (JSON-friendly) configuration class. The
validator fills every optional field that the caller leaves out from one of
these objects, so a deployment can swap market assumptions without touching
the engine.
"""

from dataclasses import asdict
from dataclasses import dataclass
import json
from typing import Any


@dataclass(frozen=True)
class ValuationDefaults:
  """
  Defaults for optional valuation parameters.

  total_payment has no fixed default; it is derived from
  annual_payment * contract_period when absent.

  Attributes:
    product_category: Product family when none is given
    paid_years: Years already paid
    market_interest_rate: Prevailing market interest rate
    inflation_rate: Expected inflation
    risk_free_rate: Risk-free rate
    industry_average_fulfillment: Fallback insurer fulfillment rate
    psychological_barrier: Premium-burden relief factor
    liquidity_premium: Liquidity premium tunable
    market_liquidity: Secondary-market liquidity
    transaction_volume: Secondary-market transaction count
    time_value_multiplier: Value of one unused contract year
  """
  product_category: str = 'Savings Plan'
  paid_years: int = 0
  market_interest_rate: float = 0.035
  inflation_rate: float = 0.02
  risk_free_rate: float = 0.02
  industry_average_fulfillment: float = 0.75
  psychological_barrier: float = 0.15
  liquidity_premium: float = 0.1
  market_liquidity: float = 0.8
  transaction_volume: float = 1000
  time_value_multiplier: float = 1.2

  @classmethod
  def default(cls) -> 'ValuationDefaults':
    """Create the standard defaults."""
    return cls()

  def to_dict(self) -> dict[str, Any]:
    """Convert to dictionary."""
    return asdict(self)

  def to_json(self) -> str:
    """Serialize to JSON string."""
    return json.dumps(self.to_dict(), indent=2)

  @classmethod
  def from_dict(cls, data: dict[str, Any]) -> 'ValuationDefaults':
    """
    Create from dictionary.

    Keys not given keep their standard default.

    Raises:
      KeyError: If data contains an unknown key
    """
    known = set(cls.__dataclass_fields__)
    unknown = sorted(set(data) - known)
    if unknown:
      raise KeyError(f'Unknown defaults: {unknown}. '
                     f'Available: {sorted(known)}')
    return cls(**data)

  @classmethod
  def from_json(cls, json_str: str) -> 'ValuationDefaults':
    """Create from JSON string."""
    return cls.from_dict(json.loads(json_str))


DEFAULTS = ValuationDefaults.default()
