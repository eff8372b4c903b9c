'''
Parameter validation for the valuation engine.

ParameterValidator turns a raw field bag (camelCase keys, as received from a
JSON body or a CSV row) into a fully populated ValuationInput. It is the only
place where the engine can fail: every calculator downstream is a total
function over the validated domain.

The field rules live on the ValuationRequest model:
- company, productName, contractPeriod, annualPayment and surrenderValue are
  required; None and blank strings count as absent
- numeric fields must be finite numbers (numeric strings are accepted,
  booleans are not)
- contractPeriod is a whole number in [1, 100], paidYears in [0, 100]
- money amounts, rates, tunables and transactionVolume are non-negative and
  bounded so every calculator result stays finite
- fulfillmentRate, industryAverageFulfillment and marketLiquidity lie in [0, 1]
- optional fields take their value from ValuationDefaults
'''

import logging
from typing import Any, List, Mapping

import pydantic
from pydantic.alias_generators import to_camel

from insurance_valuation.config import DEFAULTS
from insurance_valuation.config import ValuationDefaults
from insurance_valuation.domain.errors import ValidationError
from insurance_valuation.domain.types import ValuationInput
from insurance_valuation.validation.schemas import ValuationRequest

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    'company',
    'productName',
    'contractPeriod',
    'annualPayment',
    'surrenderValue',
)

# Wire names in declaration order; errors are reported in this order.
WIRE_NAMES = tuple(to_camel(name) for name in ValuationRequest.model_fields)


def _in_wire_order(names) -> List[str]:
  return [n for n in WIRE_NAMES if n in names]


def _or_default(value, default):
  return default if value is None else value


def _translate(exc: pydantic.ValidationError) -> ValidationError:
  '''Split model errors into missing and invalid wire names.'''
  missing = set()
  invalid = set()
  for error in exc.errors():
    if not error['loc']:
      continue
    name = str(error['loc'][0])
    if error['type'] == 'missing':
      missing.add(name)
    else:
      invalid.add(name)
  return ValidationError(missing=_in_wire_order(missing),
                         invalid=_in_wire_order(invalid))


class ParameterValidator:
  '''
  Validates raw parameters and fills documented defaults.

  Holds only the (immutable) defaults, so one instance can be shared freely.
  '''

  def __init__(self, defaults: ValuationDefaults = DEFAULTS):
    '''
    Args:
      defaults: Values for optional fields the caller leaves out
    '''
    self.defaults = defaults

  def validate(self, params: Mapping[str, Any]) -> ValuationInput:
    '''
    Validate a raw field bag.

    Args:
      params: Mapping with camelCase field names

    Returns:
      Fully populated ValuationInput

    Raises:
      ValidationError: Listing every missing and invalid field
    '''
    try:
      request = ValuationRequest.model_validate(dict(params))
    except pydantic.ValidationError as e:
      err = _translate(e)
      logger.debug('Rejected valuation parameters: missing=%s invalid=%s',
                   err.missing, err.invalid)
      raise err from e

    d = self.defaults
    return ValuationInput(
        company=request.company,
        product_name=request.product_name,
        product_category=_or_default(request.product_category,
                                     d.product_category),
        contract_period=request.contract_period,
        paid_years=_or_default(request.paid_years, d.paid_years),
        annual_payment=request.annual_payment,
        total_payment=request.total_payment,
        surrender_value=request.surrender_value,
        market_interest_rate=_or_default(request.market_interest_rate,
                                         d.market_interest_rate),
        inflation_rate=_or_default(request.inflation_rate, d.inflation_rate),
        risk_free_rate=_or_default(request.risk_free_rate, d.risk_free_rate),
        fulfillment_rate=request.fulfillment_rate,
        industry_average_fulfillment=_or_default(
            request.industry_average_fulfillment,
            d.industry_average_fulfillment),
        time_value_multiplier=_or_default(request.time_value_multiplier,
                                          d.time_value_multiplier),
        psychological_barrier=_or_default(request.psychological_barrier,
                                          d.psychological_barrier),
        liquidity_premium=_or_default(request.liquidity_premium,
                                      d.liquidity_premium),
        market_liquidity=_or_default(request.market_liquidity,
                                     d.market_liquidity),
        transaction_volume=_or_default(request.transaction_volume,
                                       d.transaction_volume),
    )
