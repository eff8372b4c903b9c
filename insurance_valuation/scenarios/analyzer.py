"""
Scenario analysis.

Re-runs the full composition under each registered scenario. Each run gets
its own immutable input variant, so no state is shared between the three.
"""

import logging
from typing import Optional

from insurance_valuation.domain.types import ScenarioSet
from insurance_valuation.domain.types import ValuationInput
from insurance_valuation.engine.composer import ValuationComposer
from insurance_valuation.scenarios.registry import build_variants

logger = logging.getLogger(__name__)


class ScenarioAnalyzer:
  """Values one input under the optimistic, realistic and conservative
  scenarios."""

  def __init__(self, composer: Optional[ValuationComposer] = None):
    self.composer = composer or ValuationComposer()

  def analyze(self, inputs: ValuationInput) -> ScenarioSet:
    """
    Value every scenario variant of an input.

    Args:
      inputs: Validated base input

    Returns:
      ScenarioSet with one ValuationResult per scenario
    """
    results = {
        name: self.composer.compose(variant)
        for name, variant in build_variants(inputs).items()
    }
    logger.debug('Scenario band for %s: %.2f .. %.2f', inputs.company,
                 results['conservative'].final_value,
                 results['optimistic'].final_value)
    return ScenarioSet(**results)
