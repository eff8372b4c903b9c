'''
Valuation entrypoint.

This module is the public surface of the engine. It:
1. Validates raw parameters into a ValuationInput
2. Runs the composer (evaluate_value) or the scenario analyzer
   (analyze_scenarios)
3. Optionally assembles the full valuation report (run_valuation) used by
   the HTTP layer and the CLI

Usage:
  from insurance_valuation.run import evaluate_value, analyze_scenarios

  result = evaluate_value({
      'company': 'AIA',
      'productName': 'Wealth Builder',
      'contractPeriod': 10,
      'paidYears': 5,
      'annualPayment': 10000,
      'surrenderValue': 40000,
  })
  print(f'Final value: {result.final_value:,.2f}')

CLI:
  python -m insurance_valuation.run --input policy.json --output report.json
'''

import argparse
from datetime import datetime
from datetime import timezone
import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from insurance_valuation.config import DEFAULTS
from insurance_valuation.config import ValuationDefaults
from insurance_valuation.domain.types import ScenarioSet
from insurance_valuation.domain.types import ValuationInput
from insurance_valuation.domain.types import ValuationResult
from insurance_valuation.engine.composer import ValuationComposer
from insurance_valuation.insights import build_business_insights
from insurance_valuation.reliability import lookup_insurer
from insurance_valuation.reliability import market_trends
from insurance_valuation.reliability import with_insurer_reliability
from insurance_valuation.scenarios.analyzer import ScenarioAnalyzer
from insurance_valuation.validation.params import ParameterValidator

logger = logging.getLogger(__name__)

Params = Union[Mapping[str, Any], ValuationInput]


def prepare_input(params: Params,
                  defaults: ValuationDefaults = DEFAULTS) -> ValuationInput:
  '''
  Validate raw parameters into a ValuationInput.

  An existing ValuationInput is checked against the same rules through its
  wire form, so a hand-built or replace()d input cannot bypass them.

  Raises:
    ValidationError: If required fields are missing or out of domain
  '''
  if isinstance(params, ValuationInput):
    params = params.to_dict()
  return ParameterValidator(defaults).validate(params)


def evaluate_value(params: Params,
                   defaults: ValuationDefaults = DEFAULTS) -> ValuationResult:
  '''
  Value one policy.

  Args:
    params: Raw camelCase parameters or a validated ValuationInput
    defaults: Defaults for optional fields

  Returns:
    ValuationResult with the full breakdown

  Raises:
    ValidationError: If required fields are missing or out of domain
  '''
  inputs = prepare_input(params, defaults)
  return ValuationComposer().compose(inputs)


def analyze_scenarios(params: Params,
                      defaults: ValuationDefaults = DEFAULTS) -> ScenarioSet:
  '''
  Value one policy under the optimistic, realistic and conservative
  scenarios.

  Validation rules are the same as evaluate_value; the input is validated
  once and composed three times.

  Raises:
    ValidationError: If required fields are missing or out of domain
  '''
  inputs = prepare_input(params, defaults)
  return ScenarioAnalyzer().analyze(inputs)


def run_valuation(
    params: Mapping[str, Any],
    defaults: ValuationDefaults = DEFAULTS,
    insurer_reliability: bool = False,
) -> Dict[str, Any]:
  '''
  Build the full valuation report for one policy.

  Args:
    params: Raw camelCase parameters
    defaults: Defaults for optional fields
    insurer_reliability: Fill a missing fulfillmentRate from the insurer
      reliability table

  Returns:
    JSON-serializable report with input echo, valuation breakdown,
    scenario summary, business insights and insurer reference data

  Raises:
    ValidationError: If required fields are missing or out of domain
  '''
  if insurer_reliability:
    params = with_insurer_reliability(params)

  inputs = prepare_input(params, defaults)
  composer = ValuationComposer()
  result = composer.compose(inputs)
  scenarios = ScenarioAnalyzer(composer).analyze(inputs)

  profile = lookup_insurer(inputs.company)
  insurer = profile.to_dict()
  insurer['marketTrends'] = market_trends(inputs.product_category)

  return {
      'success': True,
      'timestamp': datetime.now(timezone.utc).isoformat(),
      'input': inputs.to_dict(),
      'valuation': result.to_dict(),
      'scenarios': scenarios.summary(),
      'businessInsights': build_business_insights(inputs, result),
      'insurer': insurer,
  }


def _load_json(path: Path) -> Dict[str, Any]:
  with open(path, 'r', encoding='utf-8') as f:
    data = json.load(f)
  if not isinstance(data, dict):
    raise ValueError(f'{path} must contain a JSON object')
  return data


def main() -> None:
  '''CLI entrypoint.'''
  parser = argparse.ArgumentParser(
      description='Value a transferable insurance policy')
  parser.add_argument('--input',
                      type=Path,
                      required=True,
                      help='JSON file with policy parameters')
  parser.add_argument('--defaults',
                      type=Path,
                      help='JSON file overriding default assumptions')
  parser.add_argument('--insurer-reliability',
                      action='store_true',
                      help='Use the insurer table for a missing fulfillment '
                      'rate')
  parser.add_argument('--output', type=Path, help='Write JSON report here')
  args = parser.parse_args()

  defaults = DEFAULTS
  if args.defaults:
    defaults = ValuationDefaults.from_dict(_load_json(args.defaults))

  report = run_valuation(_load_json(args.input),
                         defaults=defaults,
                         insurer_reliability=args.insurer_reliability)
  echo = report['input']
  valuation = report['valuation']

  separator = '=' * 70
  logger.info('\n%s', separator)
  logger.info('Policy Valuation - %s / %s', echo['company'],
              echo['productName'])
  logger.info(separator)

  logger.info('\nPolicy:')
  logger.info('  Contract: %d years (%d paid, %d remaining)',
              echo['contractPeriod'], echo['paidYears'], echo['remainingYears'])
  logger.info('  Annual Payment: %s', f'{echo["annualPayment"]:,.2f}')
  logger.info('  Surrender Value: %s', f'{echo["surrenderValue"]:,.2f}')

  logger.info('\nBreakdown:')
  for label, key in (
      ('Time Premium', 'timePremium'),
      ('Psychological Value', 'psychologicalValue'),
      ('Market Value', 'marketValue'),
      ('Adjusted Value', 'adjustedValue'),
      ('Transaction Value', 'transactionValue'),
      ('Liquidity Value', 'liquidityValue'),
      ('Final Value', 'finalValue'),
  ):
    logger.info('  %s: %s', label, f'{valuation[key]:,.2f}')
  logger.info('  Premium Rate: %.2f%%', valuation['premiumRate'])
  logger.info('  Fulfillment Adjustment: %.2f%%',
              valuation['fulfillmentAdjustment'] * 100)

  logger.info('\nScenarios:')
  for name, summary in report['scenarios'].items():
    logger.info('  %-12s %s (%.1f%%)', name,
                f'{summary["finalValue"]:,.2f}', summary['premiumRate'])

  logger.info('%s\n', separator)

  if args.output:
    args.output.parent.mkdir(parents=True, exist_ok=True)
    with open(args.output, 'w', encoding='utf-8') as f:
      json.dump(report, f, indent=2, ensure_ascii=False)
    logger.info('Saved report to: %s', args.output)


if __name__ == '__main__':
  logging.basicConfig(
      level=logging.INFO,
      format='%(message)s',
  )
  main()
