import pytest

from insurance_valuation.api.app import create_app
from insurance_valuation.domain.types import ValuationInput
from insurance_valuation.validation.params import ParameterValidator

# Regression figures for the golden policy below.
GOLDEN = {
    'time_premium': 8.8063427813,
    'psychological_value': 39500.0,
    'market_value': 32500.015,
    'fulfillment_adjustment': 0.91,
    'adjusted_value': 101928.0274219310,
    'transaction_value': 0.8108754779,
    'liquidity_value': 10192.8027421931,
    'final_value': 112121.6410396020,
    'premium_rate': 180.3041025990,
    'optimistic_final_value': 120782.4919981682,
    'optimistic_premium_rate': 201.9562299954,
    'conservative_final_value': 103460.9280572829,
    'conservative_premium_rate': 158.6523201432,
}


def _golden_params() -> dict:
  return {
      'company': 'AIA',
      'productName': 'Wealth Builder',
      'contractPeriod': 10,
      'paidYears': 5,
      'annualPayment': 10000,
      'totalPayment': 50000,
      'surrenderValue': 40000,
      'marketInterestRate': 0.035,
      'inflationRate': 0.02,
      'riskFreeRate': 0.02,
      'fulfillmentRate': 0.8,
      'psychologicalBarrier': 0.15,
      'marketLiquidity': 0.8,
      'transactionVolume': 1000,
      'timeValueMultiplier': 1.2,
  }


@pytest.fixture
def golden_params() -> dict:
  """Raw parameters for a 10-year policy with 5 years paid."""
  return _golden_params()


@pytest.fixture
def golden_input() -> ValuationInput:
  """Validated input for the golden policy."""
  return ParameterValidator().validate(_golden_params())


@pytest.fixture
def client():
  """Flask test client."""
  app = create_app()
  app.config.update(TESTING=True)
  return app.test_client()
