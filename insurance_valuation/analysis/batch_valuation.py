'''
Batch valuation for many policies at once.

This module provides tools to:
1. Value a list of policies (e.g. rows of a CSV export)
2. Compare final values and scenario bands across policies
3. Export results to CSV for further analysis

Usage (CLI):
  python -m insurance_valuation.analysis.batch_valuation \
    --input policies.csv \
    --output results/valuations.csv \
    -v

Usage (Python API):
  from insurance_valuation.analysis.batch_valuation import batch_valuation

  df = batch_valuation([policy_a, policy_b])
  df.to_csv('results.csv', index=False)
'''

import argparse
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping

import pandas as pd

from insurance_valuation.config import DEFAULTS
from insurance_valuation.config import ValuationDefaults
from insurance_valuation.domain.errors import ValidationError
from insurance_valuation.domain.types import ScenarioSet
from insurance_valuation.domain.types import ValuationInput
from insurance_valuation.domain.types import ValuationResult
from insurance_valuation.engine.composer import ValuationComposer
from insurance_valuation.scenarios.analyzer import ScenarioAnalyzer
from insurance_valuation.validation.params import ParameterValidator

logger = logging.getLogger(__name__)


def _result_to_dict(
    inputs: ValuationInput,
    result: ValuationResult,
    scenarios: ScenarioSet,
) -> Dict[str, Any]:
  '''Flatten one valuation into a DataFrame row.'''
  row = inputs.to_dict()
  breakdown = result.to_dict()
  breakdown.pop('analysis')
  row.update(breakdown)

  for name, scenario in scenarios.items():
    row[f'{name}FinalValue'] = scenario.final_value
    row[f'{name}PremiumRate'] = scenario.premium_rate

  row.update(result.diag)
  return row


def batch_valuation(
    records: Iterable[Mapping[str, Any]],
    defaults: ValuationDefaults = DEFAULTS,
    verbose: bool = False,
) -> pd.DataFrame:
  '''
  Value many policies.

  Args:
    records: Raw camelCase parameter mappings, one per policy
    defaults: Defaults for optional fields
    verbose: Log each policy as it is valued

  Returns:
    DataFrame with one row per valid policy: the normalized input, the
    valuation breakdown, per-scenario final values and premium rates, and
    all calculator diagnostics

  Raises:
    ValueError: If no record could be valued
  '''
  validator = ParameterValidator(defaults)
  composer = ValuationComposer()
  analyzer = ScenarioAnalyzer(composer)

  rows = []
  records = list(records)
  for i, record in enumerate(records, 1):
    try:
      inputs = validator.validate(record)
    except ValidationError as e:
      logger.warning('Skipping record %d: %s', i, e)
      continue

    result = composer.compose(inputs)
    rows.append(_result_to_dict(inputs, result, analyzer.analyze(inputs)))

    if verbose:
      logger.info('[%d/%d] %s / %s: final=%s premium=%.1f%%', i, len(records),
                  inputs.company, inputs.product_name,
                  f'{result.final_value:,.2f}', result.premium_rate)

  if not rows:
    raise ValueError(f'No valid records among {len(records)}')

  return pd.DataFrame(rows)


def load_records(path: Path) -> List[Dict[str, Any]]:
  '''Load policy records from CSV; empty cells become None.'''
  df = pd.read_csv(path)
  df = df.astype(object).where(df.notna(), None)
  records: List[Dict[str, Any]] = df.to_dict('records')
  return records


def _print_summary(df: pd.DataFrame) -> None:
  '''Print summary statistics for batch valuation results.'''
  logger.info('')
  logger.info('=' * 70)
  logger.info('Summary Statistics')
  logger.info('=' * 70)
  logger.info('Total policies: %d', len(df))
  logger.info('')

  logger.info('Final Value:')
  logger.info('  Mean:   %s', f'{df["finalValue"].mean():,.2f}')
  logger.info('  Median: %s', f'{df["finalValue"].median():,.2f}')
  logger.info('')

  logger.info('Premium Rate:')
  logger.info('  Mean:   %.1f%%', df['premiumRate'].mean())
  logger.info('  Median: %.1f%%', df['premiumRate'].median())
  logger.info('  Min:    %.1f%% (%s)', df['premiumRate'].min(),
              df.loc[df['premiumRate'].idxmin(), 'productName'])
  logger.info('  Max:    %.1f%% (%s)', df['premiumRate'].max(),
              df.loc[df['premiumRate'].idxmax(), 'productName'])
  logger.info('')

  band = df['optimisticFinalValue'] - df['conservativeFinalValue']
  logger.info('Scenario band width (optimistic - conservative):')
  logger.info('  Mean:   %s', f'{band.mean():,.2f}')
  logger.info('=' * 70)


def main() -> None:
  '''CLI entrypoint for batch valuation.'''
  parser = argparse.ArgumentParser(
      description='Batch valuation for many policies',
      formatter_class=argparse.RawDescriptionHelpFormatter,
      epilog=__doc__,
  )
  parser.add_argument('--input',
                      type=Path,
                      required=True,
                      help='CSV file with one policy per row')
  parser.add_argument('--output',
                      type=Path,
                      required=True,
                      help='Output CSV file path')
  parser.add_argument('--defaults',
                      type=Path,
                      help='JSON file overriding default assumptions')
  parser.add_argument('-v',
                      '--verbose',
                      action='store_true',
                      help='Verbose output')

  args = parser.parse_args()

  logging.basicConfig(
      level=logging.DEBUG if args.verbose else logging.INFO,
      format='%(asctime)s [%(levelname)s] %(message)s',
      datefmt='%Y-%m-%d %H:%M:%S',
  )

  defaults = DEFAULTS
  if args.defaults:
    defaults = ValuationDefaults.from_json(
        args.defaults.read_text(encoding='utf-8'))

  records = load_records(args.input)
  logger.info('Loaded %d policies from %s', len(records), args.input)

  results = batch_valuation(records, defaults=defaults, verbose=args.verbose)

  args.output.parent.mkdir(parents=True, exist_ok=True)
  results.to_csv(args.output, index=False)

  logger.info('')
  logger.info('Saved %d results to %s', len(results), args.output)

  _print_summary(results)


if __name__ == '__main__':
  main()
