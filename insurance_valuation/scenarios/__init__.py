"""Scenario configuration, registry and analysis."""

from insurance_valuation.scenarios.analyzer import ScenarioAnalyzer
from insurance_valuation.scenarios.config import ScenarioConfig
from insurance_valuation.scenarios.registry import build_variants
from insurance_valuation.scenarios.registry import get_scenario
from insurance_valuation.scenarios.registry import list_scenarios
from insurance_valuation.scenarios.registry import SCENARIO_REGISTRY

__all__ = [
  'ScenarioAnalyzer',
  'ScenarioConfig',
  'SCENARIO_REGISTRY',
  'build_variants',
  'get_scenario',
  'list_scenarios',
]
