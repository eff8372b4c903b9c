from dataclasses import replace

import pytest

from insurance_valuation.components.fulfillment import fulfillment_adjustment
from insurance_valuation.components.fulfillment import FulfillmentAdjuster


class TestFulfillmentAdjustment:
  """Tests for fulfillment_adjustment function."""

  @pytest.mark.parametrize('rate,expected', [
      (0.0, 1.15),
      (0.5, 1.0),
      (0.75, 0.925),
      (0.8, 0.91),
      (1.0, 0.85),
  ])
  def test_values(self, rate, expected):
    """1 + (0.5 - rate) * 0.3 over the valid domain."""
    assert fulfillment_adjustment(rate) == pytest.approx(expected)

  def test_floor(self):
    """The adjustment never drops below 0.7."""
    assert fulfillment_adjustment(2.0) == 0.7

  def test_bounds_and_monotonic(self):
    """Over [0, 1] the adjustment lies in [0.7, 1.15] and decreases."""
    rates = [i / 100 for i in range(101)]
    values = [fulfillment_adjustment(r) for r in rates]

    assert all(0.7 <= v <= 1.15 + 1e-12 for v in values)
    assert values == sorted(values, reverse=True)


class TestFulfillmentAdjuster:
  """Tests for FulfillmentAdjuster."""

  def test_individual_rate(self, golden_input):
    """The insurer's own rate is used when given."""
    result = FulfillmentAdjuster().compute(golden_input)

    assert result.value == pytest.approx(0.91)
    assert result.diag['effective_rate'] == 0.8
    assert result.diag['rate_source'] == 'individual'

  def test_industry_average(self, golden_input):
    """Without an individual rate the industry average applies."""
    inputs = replace(golden_input, fulfillment_rate=None)
    result = FulfillmentAdjuster().compute(inputs)

    assert result.value == pytest.approx(0.925)
    assert result.diag['rate_source'] == 'industry_average'

  def test_zero_rate_is_individual(self, golden_input):
    """A rate of 0 is an individual rate, not a missing one."""
    inputs = replace(golden_input, fulfillment_rate=0.0)
    result = FulfillmentAdjuster().compute(inputs)

    assert result.value == pytest.approx(1.15)
    assert result.diag['rate_source'] == 'individual'
