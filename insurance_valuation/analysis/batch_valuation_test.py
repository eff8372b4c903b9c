import pytest

from insurance_valuation.analysis.batch_valuation import batch_valuation
from insurance_valuation.analysis.batch_valuation import load_records
from insurance_valuation.conftest import GOLDEN


class TestBatchValuation:
  """Tests for batch_valuation function."""

  def test_values_each_record(self, golden_params):
    """One row per valid record with breakdown and scenario columns."""
    other = dict(golden_params, company='FWD Group', paidYears=8)
    df = batch_valuation([golden_params, other])

    assert len(df) == 2
    assert list(df['company']) == ['AIA', 'FWD Group']
    assert df.loc[0, 'finalValue'] == pytest.approx(GOLDEN['final_value'],
                                                    rel=1e-9)
    assert df.loc[0, 'optimisticFinalValue'] == pytest.approx(
        GOLDEN['optimistic_final_value'], rel=1e-9)
    assert df.loc[1, 'remainingYears'] == 2
    assert 'fulfillment_rate_source' in df.columns
    assert 'analysis' not in df.columns

  def test_skips_invalid(self, golden_params):
    """Invalid records are skipped."""
    bad = dict(golden_params)
    del bad['surrenderValue']

    df = batch_valuation([bad, golden_params])

    assert len(df) == 1
    assert df.loc[0, 'company'] == 'AIA'

  def test_nothing_valid(self, golden_params):
    """A batch with no valid record raises ValueError."""
    bad = dict(golden_params, contractPeriod=0)
    with pytest.raises(ValueError, match='No valid records'):
      batch_valuation([bad])


class TestLoadRecords:
  """Tests for load_records function."""

  def test_empty_cells_become_none(self, tmp_path):
    """Empty CSV cells are treated as absent fields."""
    path = tmp_path / 'policies.csv'
    path.write_text(
        'company,productName,contractPeriod,annualPayment,surrenderValue,'
        'fulfillmentRate\n'
        'AIA,Wealth Builder,10,10000,40000,0.8\n'
        'AXA,Smart Saver,15,8000,30000,\n',
        encoding='utf-8')

    records = load_records(path)

    assert len(records) == 2
    assert records[0]['fulfillmentRate'] == 0.8
    assert records[1]['fulfillmentRate'] is None

    df = batch_valuation(records)
    assert list(df['fulfillment_rate_source']) == [
        'individual', 'industry_average'
    ]
