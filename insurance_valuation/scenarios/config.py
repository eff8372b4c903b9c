"""
Scenario configuration for sensitivity analysis.

ScenarioConfig is a serializable (JSON-friendly) description of one named
perturbation of the behavioral and market multipliers. Applying it to a
ValuationInput produces a new, independent input; the base input is never
modified.
"""

from dataclasses import asdict
from dataclasses import dataclass
from dataclasses import replace
import json
from typing import Any

from insurance_valuation.domain.types import ValuationInput


@dataclass(frozen=True)
class ScenarioConfig:
  """
  Multipliers for one valuation scenario.

  Only these three inputs are perturbed; every other field of the base
  input carries over unchanged.

  Attributes:
    name: Scenario name
    time_value_factor: Multiplier on time_value_multiplier
    psychological_barrier_factor: Multiplier on psychological_barrier
    market_liquidity_factor: Multiplier on market_liquidity
  """
  name: str = 'realistic'
  time_value_factor: float = 1.0
  psychological_barrier_factor: float = 1.0
  market_liquidity_factor: float = 1.0

  @classmethod
  def optimistic(cls) -> 'ScenarioConfig':
    """Stronger time value, relief and liquidity: x(1.2, 1.3, 1.2)."""
    return cls(
        name='optimistic',
        time_value_factor=1.2,
        psychological_barrier_factor=1.3,
        market_liquidity_factor=1.2,
    )

  @classmethod
  def realistic(cls) -> 'ScenarioConfig':
    """Base assumptions unchanged."""
    return cls(name='realistic')

  @classmethod
  def conservative(cls) -> 'ScenarioConfig':
    """Weaker time value, relief and liquidity: x(0.8, 0.7, 0.8)."""
    return cls(
        name='conservative',
        time_value_factor=0.8,
        psychological_barrier_factor=0.7,
        market_liquidity_factor=0.8,
    )

  def apply(self, inputs: ValuationInput) -> ValuationInput:
    """
    Build the scenario variant of an input.

    Args:
      inputs: Base valuation input

    Returns:
      New ValuationInput with the three multipliers scaled
    """
    return replace(
        inputs,
        time_value_multiplier=(inputs.time_value_multiplier *
                               self.time_value_factor),
        psychological_barrier=(inputs.psychological_barrier *
                               self.psychological_barrier_factor),
        market_liquidity=inputs.market_liquidity * self.market_liquidity_factor,
    )

  def to_dict(self) -> dict[str, Any]:
    """Convert to dictionary."""
    return asdict(self)

  def to_json(self) -> str:
    """Serialize to JSON string."""
    return json.dumps(self.to_dict(), indent=2)

  @classmethod
  def from_dict(cls, data: dict[str, Any]) -> 'ScenarioConfig':
    """Create from dictionary."""
    return cls(**data)

  @classmethod
  def from_json(cls, json_str: str) -> 'ScenarioConfig':
    """Create from JSON string."""
    return cls.from_dict(json.loads(json_str))
