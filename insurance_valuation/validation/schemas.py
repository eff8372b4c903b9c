"""Request contract for valuation parameters."""

from typing import Any, Optional

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator
from pydantic.alias_generators import to_camel

# Upper bounds keep every calculator finite (1.05 ** years, money sums).
MAX_YEARS = 100
MAX_AMOUNT = 1e15
MAX_TOTAL_PAYMENT = MAX_AMOUNT * MAX_YEARS
MAX_RATE = 10.0
MAX_TUNABLE = 100.0
MAX_TRANSACTION_VOLUME = 1e12

NUMERIC_FIELDS = (
    'contract_period',
    'paid_years',
    'annual_payment',
    'total_payment',
    'surrender_value',
    'market_interest_rate',
    'inflation_rate',
    'risk_free_rate',
    'fulfillment_rate',
    'industry_average_fulfillment',
    'time_value_multiplier',
    'psychological_barrier',
    'liquidity_premium',
    'market_liquidity',
    'transaction_volume',
)


class ValuationRequest(BaseModel):
  """
  Raw valuation parameters as received on the wire (camelCase keys).

  Optional fields are None when absent; ParameterValidator fills them from
  ValuationDefaults. None and blank strings count as absent, so a blank
  required field reports as missing.
  """

  model_config = ConfigDict(
      alias_generator=to_camel,
      allow_inf_nan=False,
      extra='ignore',
  )

  company: str = Field(..., min_length=1)
  product_name: str = Field(..., min_length=1)
  product_category: Optional[str] = None
  contract_period: int = Field(..., gt=0, le=MAX_YEARS)
  paid_years: Optional[int] = Field(None, ge=0, le=MAX_YEARS)
  annual_payment: float = Field(..., ge=0, le=MAX_AMOUNT)
  total_payment: Optional[float] = Field(None, ge=0, le=MAX_TOTAL_PAYMENT)
  surrender_value: float = Field(..., ge=0, le=MAX_AMOUNT)
  market_interest_rate: Optional[float] = Field(None, ge=0, le=MAX_RATE)
  inflation_rate: Optional[float] = Field(None, ge=0, le=MAX_RATE)
  risk_free_rate: Optional[float] = Field(None, ge=0, le=MAX_RATE)
  fulfillment_rate: Optional[float] = Field(None, ge=0, le=1)
  industry_average_fulfillment: Optional[float] = Field(None, ge=0, le=1)
  time_value_multiplier: Optional[float] = Field(None, ge=0, le=MAX_TUNABLE)
  psychological_barrier: Optional[float] = Field(None, ge=0, le=MAX_TUNABLE)
  liquidity_premium: Optional[float] = Field(None, ge=0, le=MAX_TUNABLE)
  market_liquidity: Optional[float] = Field(None, ge=0, le=1)
  transaction_volume: Optional[float] = Field(None,
                                              ge=0,
                                              le=MAX_TRANSACTION_VOLUME)

  @model_validator(mode='before')
  @classmethod
  def _drop_blank(cls, data: Any) -> Any:
    """Strip strings and drop None or blank values."""
    if not isinstance(data, dict):
      return data
    cleaned = {}
    for key, value in data.items():
      if isinstance(value, str):
        value = value.strip()
        if not value:
          continue
      if value is None:
        continue
      cleaned[key] = value
    return cleaned

  @field_validator(*NUMERIC_FIELDS, mode='before')
  @classmethod
  def _reject_bool(cls, value: Any) -> Any:
    if isinstance(value, bool):
      raise ValueError('boolean is not a number')
    return value

  @model_validator(mode='after')
  def _derive_total_payment(self) -> 'ValuationRequest':
    if self.total_payment is None:
      self.total_payment = self.annual_payment * self.contract_period
    return self
