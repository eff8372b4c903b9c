'''
Base class for value calculators.

Every calculator reads the same validated ValuationInput and returns a
ComponentOutput: the monetary (or multiplier) value plus diagnostics
explaining how it was computed. Calculators never see each other's output;
only the composer combines them.
'''

from abc import ABC
from abc import abstractmethod

from insurance_valuation.domain.types import ComponentOutput
from insurance_valuation.domain.types import ValuationInput


class ValueCalculator(ABC):
  '''
  Base class for valuation components.

  Subclasses implement compute(). Implementations must hold no mutable
  state so a single instance can serve concurrent valuations.
  '''

  @abstractmethod
  def compute(self, inputs: ValuationInput) -> ComponentOutput[float]:
    '''
    Compute this component's value.

    Args:
      inputs: Validated valuation parameters

    Returns:
      ComponentOutput with the value and diagnostics
    '''
