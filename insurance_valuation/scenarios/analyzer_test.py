from dataclasses import replace

import pytest

from insurance_valuation.conftest import GOLDEN
from insurance_valuation.engine.composer import ValuationComposer
from insurance_valuation.scenarios.analyzer import ScenarioAnalyzer


class TestScenarioAnalyzer:
  """Tests for ScenarioAnalyzer."""

  def test_golden(self, golden_input):
    """Golden policy scenario band is pinned."""
    scenarios = ScenarioAnalyzer().analyze(golden_input)

    assert scenarios.optimistic.final_value == pytest.approx(
        GOLDEN['optimistic_final_value'], rel=1e-9)
    assert scenarios.optimistic.premium_rate == pytest.approx(
        GOLDEN['optimistic_premium_rate'], rel=1e-9)
    assert scenarios.conservative.final_value == pytest.approx(
        GOLDEN['conservative_final_value'], rel=1e-9)
    assert scenarios.conservative.premium_rate == pytest.approx(
        GOLDEN['conservative_premium_rate'], rel=1e-9)

  def test_realistic_equals_base(self, golden_input):
    """The realistic scenario is the plain valuation."""
    scenarios = ScenarioAnalyzer().analyze(golden_input)
    assert scenarios.realistic == ValuationComposer().compose(golden_input)

  @pytest.mark.parametrize('overrides', [
      {},
      {'paid_years': 0},
      {'paid_years': 10},
      {'fulfillment_rate': None},
      {'fulfillment_rate': 0.3},
      {'surrender_value': 0},
      {'transaction_volume': 0, 'market_liquidity': 0.0},
      {'contract_period': 30, 'paid_years': 2, 'annual_payment': 2500},
  ])
  def test_monotonic_band(self, golden_input, overrides):
    """conservative <= realistic <= optimistic while paid <= term."""
    inputs = replace(golden_input, **overrides)
    s = ScenarioAnalyzer().analyze(inputs)

    assert (s.conservative.final_value <= s.realistic.final_value <=
            s.optimistic.final_value)

  def test_base_input_unchanged(self, golden_input):
    """Analysis does not modify the base input."""
    before = golden_input.to_dict()
    ScenarioAnalyzer().analyze(golden_input)
    assert golden_input.to_dict() == before

  def test_overpaid_contract_inverts_band(self, golden_input):
    """Paid years beyond the term with a small surrender value invert the band.

    With 12 of 10 years paid the burden reduction is -2 * 10000 * barrier,
    and the optimistic barrier (x1.3) makes it more negative:
    optimistic  psychological: -3900 + 800
    realistic   psychological: -3000 + 800
    conservative psychological: -2100 + 800
    The liquidity uplift on a 1000 surrender value is far smaller.
    """
    inputs = replace(golden_input, paid_years=12, surrender_value=1000)
    s = ScenarioAnalyzer().analyze(inputs)

    assert (s.optimistic.final_value < s.realistic.final_value <
            s.conservative.final_value)
