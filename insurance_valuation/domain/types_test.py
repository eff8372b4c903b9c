from dataclasses import FrozenInstanceError
from dataclasses import replace

import pytest

from insurance_valuation.domain.errors import ValidationError
from insurance_valuation.domain.types import SCENARIO_NAMES
from insurance_valuation.engine.composer import ValuationComposer
from insurance_valuation.scenarios.analyzer import ScenarioAnalyzer


class TestValuationInput:
  """Tests for ValuationInput."""

  @pytest.mark.parametrize('contract_period,paid_years,expected', [
      (10, 0, 10),
      (10, 5, 5),
      (10, 10, 0),
      (10, 12, 0),
      (1, 0, 1),
  ])
  def test_remaining_years(self, golden_input, contract_period, paid_years,
                           expected):
    """remaining_years is contract_period - paid_years floored at zero."""
    inputs = replace(golden_input,
                     contract_period=contract_period,
                     paid_years=paid_years)
    assert inputs.remaining_years == expected

  def test_frozen(self, golden_input):
    """Inputs cannot be mutated."""
    with pytest.raises(FrozenInstanceError):
      golden_input.surrender_value = 0  # type: ignore[misc]

  def test_to_dict_wire_names(self, golden_input):
    """to_dict uses camelCase names and includes remainingYears."""
    d = golden_input.to_dict()
    assert d['productName'] == 'Wealth Builder'
    assert d['contractPeriod'] == 10
    assert d['remainingYears'] == 5
    assert d['fulfillmentRate'] == 0.8
    assert 'product_name' not in d


class TestValuationResult:
  """Tests for ValuationResult serialization."""

  def test_to_dict(self, golden_input):
    """Wire form carries the breakdown and analysis but not diagnostics."""
    d = ValuationComposer().compose(golden_input).to_dict()

    assert d['baseValue'] == d['surrenderValue'] == 40000
    assert set(d['analysis']) == {
        'timeValue', 'psychologicalBenefit', 'marketOpportunity',
        'riskAssessment'
    }
    assert 'diag' not in d


class TestScenarioSet:
  """Tests for ScenarioSet."""

  def test_lookup_and_order(self, golden_input):
    """Lookup by name; items() follows optimistic -> conservative."""
    scenarios = ScenarioAnalyzer().analyze(golden_input)

    assert scenarios['optimistic'] is scenarios.optimistic
    assert [name for name, _ in scenarios.items()] == list(SCENARIO_NAMES)

  def test_unknown_name(self, golden_input):
    """Unknown scenario names raise KeyError listing the available ones."""
    scenarios = ScenarioAnalyzer().analyze(golden_input)
    with pytest.raises(KeyError, match='Available'):
      _ = scenarios['pessimistic']

  def test_summary(self, golden_input):
    """summary() reports finalValue and premiumRate per scenario."""
    summary = ScenarioAnalyzer().analyze(golden_input).summary()

    assert list(summary) == list(SCENARIO_NAMES)
    assert set(summary['realistic']) == {'finalValue', 'premiumRate'}


class TestValidationError:
  """Tests for ValidationError."""

  def test_message_lists_fields(self):
    """Message names every missing and invalid field."""
    err = ValidationError(missing=['company'], invalid=['paidYears'])

    assert isinstance(err, ValueError)
    assert 'company' in str(err)
    assert 'paidYears' in str(err)
    assert err.fields == ['company', 'paidYears']

  def test_empty(self):
    """An error with no fields still has a message."""
    assert str(ValidationError()) == 'invalid valuation parameters'
