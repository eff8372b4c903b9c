import pytest

from insurance_valuation.analysis.sensitivity import _parse_float_list
from insurance_valuation.analysis.sensitivity import SensitivityTableBuilder
from insurance_valuation.conftest import GOLDEN
from insurance_valuation.domain.errors import ValidationError


class TestSensitivityTableBuilder:
  """Tests for SensitivityTableBuilder."""

  def test_shape_and_labels(self, golden_input):
    """Rows and columns follow the given fields and values."""
    table = SensitivityTableBuilder(golden_input).build(
        row_field='psychological_barrier',
        row_values=[0.10, 0.15, 0.20],
        col_field='market_liquidity',
        col_values=[0.6, 0.8],
    )

    assert table.shape == (3, 2)
    assert table.index.name == 'psychological_barrier'
    assert table.columns.name == 'market_liquidity'
    assert list(table.index) == ['0.1', '0.15', '0.2']
    assert list(table.columns) == ['0.6', '0.8']

  def test_base_cell_matches_golden(self, golden_input):
    """The cell at the base assumptions is the plain valuation."""
    table = SensitivityTableBuilder(golden_input).build(
        row_field='psychological_barrier',
        row_values=[0.10, 0.15],
        col_field='market_liquidity',
        col_values=[0.6, 0.8],
    )

    assert table.loc['0.15', '0.8'] == pytest.approx(GOLDEN['final_value'],
                                                     rel=1e-9)

  def test_monotonic(self, golden_input):
    """Final value rises with both barrier and liquidity."""
    table = SensitivityTableBuilder(golden_input).build(
        row_field='psychological_barrier',
        row_values=[0.05, 0.15, 0.25],
        col_field='market_liquidity',
        col_values=[0.2, 0.5, 0.9],
    )

    for _, row in table.iterrows():
      assert list(row) == sorted(row)
    for col in table.columns:
      assert list(table[col]) == sorted(table[col])

  def test_other_metric(self, golden_input):
    """Any breakdown field can be tabulated."""
    table = SensitivityTableBuilder(golden_input).build(
        row_field='fulfillment_rate',
        row_values=[0.8],
        col_field='transaction_volume',
        col_values=[1000],
        metric='premium_rate',
    )

    assert table.iloc[0, 0] == pytest.approx(GOLDEN['premium_rate'], rel=1e-9)

  def test_out_of_domain_value(self, golden_input):
    """Grid values go through validation."""
    with pytest.raises(ValidationError):
      SensitivityTableBuilder(golden_input).build(
          row_field='market_liquidity',
          row_values=[1.5],
          col_field='inflation_rate',
          col_values=[0.02],
      )

  @pytest.mark.parametrize('kwargs,match', [
      ({'row_field': 'surrender_value'}, 'Unknown field'),
      ({'col_field': 'psychological_barrier'}, 'must differ'),
      ({'metric': 'diag'}, 'Unknown metric'),
      ({'row_values': []}, 'cannot be empty'),
      ({'col_values': []}, 'cannot be empty'),
  ])
  def test_bad_arguments(self, golden_input, kwargs, match):
    """Bad fields, metrics and empty value lists are rejected."""
    args = {
        'row_field': 'psychological_barrier',
        'row_values': [0.15],
        'col_field': 'market_liquidity',
        'col_values': [0.8],
    }
    args.update(kwargs)

    with pytest.raises(ValueError, match=match):
      SensitivityTableBuilder(golden_input).build(**args)


def test_parse_float_list():
  """Comma-separated floats with spaces."""
  assert _parse_float_list('0.1, 0.2,0.3') == [0.1, 0.2, 0.3]
