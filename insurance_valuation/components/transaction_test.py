from dataclasses import replace
import math

import pytest

from insurance_valuation.components.transaction import TransactionValueCalculator


class TestTransactionValueCalculator:
  """Tests for TransactionValueCalculator."""

  def test_golden(self, golden_input):
    """ln(1001) * 0.1 + 0.8 * 0.15."""
    result = TransactionValueCalculator().compute(golden_input)

    assert result.value == pytest.approx(0.8108754779, rel=1e-9)
    assert result.diag['volume_premium'] == pytest.approx(math.log(1001) * 0.1)
    assert result.diag['liquidity_premium'] == pytest.approx(0.12)

  def test_zero_volume(self, golden_input):
    """Zero volume contributes nothing: ln(1) = 0."""
    inputs = replace(golden_input, transaction_volume=0, market_liquidity=0)
    assert TransactionValueCalculator().compute(inputs).value == 0
