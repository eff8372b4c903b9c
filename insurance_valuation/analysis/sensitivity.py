"""
Sensitivity analysis for policy valuation.

This module provides tools to generate 2D sensitivity tables that show how a
valuation metric varies across two input assumptions while every other
input stays fixed.

CLI Usage:
  python -m insurance_valuation.analysis.sensitivity \\
      --input policy.json \\
      --row-field psychological_barrier --row-values 0.10,0.15,0.20 \\
      --col-field market_liquidity --col-values 0.6,0.8,1.0
"""

import argparse
import json
import logging
from pathlib import Path
from typing import Optional

import pandas as pd

from insurance_valuation.domain.types import ValuationInput
from insurance_valuation.engine.composer import ValuationComposer
from insurance_valuation.validation.params import ParameterValidator

logger = logging.getLogger(__name__)

# Input attribute -> wire name. Only these may be varied.
TUNABLE_FIELDS: dict[str, str] = {
    'market_interest_rate': 'marketInterestRate',
    'inflation_rate': 'inflationRate',
    'risk_free_rate': 'riskFreeRate',
    'fulfillment_rate': 'fulfillmentRate',
    'industry_average_fulfillment': 'industryAverageFulfillment',
    'time_value_multiplier': 'timeValueMultiplier',
    'psychological_barrier': 'psychologicalBarrier',
    'market_liquidity': 'marketLiquidity',
    'transaction_volume': 'transactionVolume',
}

METRICS = (
    'final_value',
    'premium_rate',
    'adjusted_value',
    'time_premium',
    'psychological_value',
    'market_value',
    'transaction_value',
    'liquidity_value',
)


class SensitivityTableBuilder:
  """
  Build 2D sensitivity tables for a single policy.

  Every grid cell is an independent valuation of a variant of the base
  input. Variants go back through the parameter validator, so out-of-domain
  grid values raise ValidationError instead of producing nonsense.
  """

  def __init__(self,
               inputs: ValuationInput,
               composer: Optional[ValuationComposer] = None):
    """
    Initialize sensitivity table builder.

    Args:
        inputs: Validated base input
        composer: Composer to run per cell (default: standard)
    """
    self.inputs = inputs
    self.composer = composer or ValuationComposer()
    self._validator = ParameterValidator()

    logger.info('Initialized SensitivityTableBuilder')
    logger.info('  Policy: %s / %s', inputs.company, inputs.product_name)
    logger.info('  Surrender value: %s', f'{inputs.surrender_value:,.2f}')
    logger.info('  Remaining years: %d', inputs.remaining_years)

  def _variant(self, **overrides: float) -> ValuationInput:
    params = self.inputs.to_dict()
    for attr, value in overrides.items():
      params[TUNABLE_FIELDS[attr]] = value
    return self._validator.validate(params)

  def build(
      self,
      row_field: str,
      row_values: list[float],
      col_field: str,
      col_values: list[float],
      metric: str = 'final_value',
  ) -> pd.DataFrame:
    """
    Build 2D sensitivity table.

    Args:
        row_field: Input attribute varied down the rows
        row_values: Values for row_field
        col_field: Input attribute varied across the columns
        col_values: Values for col_field
        metric: ValuationResult attribute to tabulate

    Returns:
        DataFrame with row_field values as index, col_field values as
        columns, and the metric as cell values

    Raises:
        ValueError: On unknown fields or metric, or empty value lists
    """
    for name in (row_field, col_field):
      if name not in TUNABLE_FIELDS:
        raise ValueError(f"Unknown field: '{name}'. "
                         f'Available: {list(TUNABLE_FIELDS.keys())}')
    if row_field == col_field:
      raise ValueError('row_field and col_field must differ')
    if metric not in METRICS:
      raise ValueError(f"Unknown metric: '{metric}'. Available: {list(METRICS)}")
    if not row_values:
      raise ValueError('row_values cannot be empty')
    if not col_values:
      raise ValueError('col_values cannot be empty')

    logger.info('Building sensitivity table: %d x %d', len(row_values),
                len(col_values))

    data_rows = []
    for r in row_values:
      row_data = []
      for c in col_values:
        variant = self._variant(**{row_field: r, col_field: c})
        result = self.composer.compose(variant)
        row_data.append(getattr(result, metric))
      data_rows.append(row_data)

    df = pd.DataFrame(data_rows,
                      index=[f'{r:g}' for r in row_values],
                      columns=[f'{c:g}' for c in col_values])
    df.index.name = row_field
    df.columns.name = col_field

    logger.info('Sensitivity table built successfully')
    return df


def _parse_float_list(s: str) -> list[float]:
  """Parse comma-separated float list."""
  return [float(x.strip()) for x in s.split(',')]


def main() -> None:
  """CLI entrypoint for sensitivity analysis."""
  parser = argparse.ArgumentParser(
      description='Policy valuation sensitivity analysis',
      formatter_class=argparse.RawDescriptionHelpFormatter,
      epilog=__doc__)

  parser.add_argument('--input',
                      type=Path,
                      required=True,
                      help='JSON file with policy parameters')
  parser.add_argument('--row-field',
                      type=str,
                      default='psychological_barrier',
                      choices=list(TUNABLE_FIELDS),
                      help='Input varied down the rows')
  parser.add_argument('--row-values',
                      type=str,
                      default='0.10,0.15,0.20',
                      help='Comma-separated row values')
  parser.add_argument('--col-field',
                      type=str,
                      default='market_liquidity',
                      choices=list(TUNABLE_FIELDS),
                      help='Input varied across the columns')
  parser.add_argument('--col-values',
                      type=str,
                      default='0.6,0.8,1.0',
                      help='Comma-separated column values')
  parser.add_argument('--metric',
                      type=str,
                      default='final_value',
                      choices=list(METRICS),
                      help='Result field to tabulate')
  parser.add_argument('--output', type=Path, help='Output CSV path (optional)')
  parser.add_argument('--verbose',
                      '-v',
                      action='store_true',
                      help='Verbose output')

  args = parser.parse_args()

  logging.basicConfig(
      level=logging.DEBUG if args.verbose else logging.INFO,
      format='%(asctime)s [%(levelname)s] %(message)s',
      datefmt='%Y-%m-%d %H:%M:%S',
  )

  with open(args.input, 'r', encoding='utf-8') as f:
    params = json.load(f)
  inputs = ParameterValidator().validate(params)

  builder = SensitivityTableBuilder(inputs)
  table = builder.build(
      row_field=args.row_field,
      row_values=_parse_float_list(args.row_values),
      col_field=args.col_field,
      col_values=_parse_float_list(args.col_values),
      metric=args.metric,
  )

  print('\n' + '=' * 80)
  print(f'Sensitivity Analysis: {inputs.company} / {inputs.product_name}')
  print('=' * 80)
  print(f'Metric: {args.metric}')
  print(table.to_string(float_format=lambda x: f'{x:,.2f}'))
  print('=' * 80 + '\n')

  if args.output:
    table.to_csv(args.output)
    logger.info('Saved to: %s', args.output)


if __name__ == '__main__':
  main()
