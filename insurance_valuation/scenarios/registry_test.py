import pytest

from insurance_valuation.domain.types import SCENARIO_NAMES
from insurance_valuation.scenarios.registry import build_variants
from insurance_valuation.scenarios.registry import get_scenario
from insurance_valuation.scenarios.registry import list_scenarios


class TestRegistry:
  """Tests for the scenario registry."""

  def test_list(self):
    """All three scenarios are registered in order."""
    assert list_scenarios() == list(SCENARIO_NAMES)

  def test_get(self):
    """get_scenario returns a fresh config with the right name."""
    for name in SCENARIO_NAMES:
      assert get_scenario(name).name == name

  def test_unknown(self):
    """Unknown names raise KeyError listing the available ones."""
    with pytest.raises(KeyError, match='Available'):
      get_scenario('pessimistic')

  def test_build_variants(self, golden_input):
    """One independent variant per scenario; realistic equals the base."""
    variants = build_variants(golden_input)

    assert list(variants) == list(SCENARIO_NAMES)
    assert variants['realistic'] == golden_input
    assert variants['optimistic'] is not variants['conservative']
    assert (variants['conservative'].market_liquidity <
            variants['realistic'].market_liquidity <
            variants['optimistic'].market_liquidity)
