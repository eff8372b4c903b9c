"""
Scenario registry mapping scenario names to configuration factories.

The three registered scenarios are the fixed sensitivity band reported with
every valuation. Names follow SCENARIO_NAMES order.
"""

from collections.abc import Callable

from insurance_valuation.domain.types import SCENARIO_NAMES
from insurance_valuation.domain.types import ValuationInput
from insurance_valuation.scenarios.config import ScenarioConfig

SCENARIO_REGISTRY: dict[str, Callable[[], ScenarioConfig]] = {
    'optimistic': ScenarioConfig.optimistic,
    'realistic': ScenarioConfig.realistic,
    'conservative': ScenarioConfig.conservative,
}


def get_scenario(name: str) -> ScenarioConfig:
  """
  Create a scenario configuration by name.

  Raises:
    KeyError: If the name is not registered
  """
  try:
    factory = SCENARIO_REGISTRY[name]
  except KeyError as e:
    raise KeyError(f"Unknown scenario: '{name}'. "
                   f'Available: {list(SCENARIO_REGISTRY.keys())}') from e
  return factory()


def list_scenarios() -> list[str]:
  """List registered scenario names."""
  return list(SCENARIO_REGISTRY.keys())


def build_variants(inputs: ValuationInput) -> dict[str, ValuationInput]:
  """
  Build one independent input per scenario.

  Args:
    inputs: Base valuation input

  Returns:
    Dictionary mapping scenario name to its input variant
  """
  return {name: get_scenario(name).apply(inputs) for name in SCENARIO_NAMES}
