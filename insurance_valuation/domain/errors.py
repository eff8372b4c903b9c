'''Errors raised by the valuation engine.'''

from typing import Iterable, List


class ValidationError(ValueError):
  '''
  Raised when raw valuation parameters are missing or out of domain.

  This is the only error the engine raises. Every problem found in one
  parameter bag is reported together.

  Attributes:
    missing: Required field names that were absent
    invalid: Field names whose values were outside their domain
  '''

  def __init__(self,
               missing: Iterable[str] = (),
               invalid: Iterable[str] = ()):
    self.missing: List[str] = list(missing)
    self.invalid: List[str] = list(invalid)

    parts = []
    if self.missing:
      parts.append(f'missing required fields: {", ".join(self.missing)}')
    if self.invalid:
      parts.append(f'invalid fields: {", ".join(self.invalid)}')
    super().__init__('; '.join(parts) or 'invalid valuation parameters')

  @property
  def fields(self) -> List[str]:
    '''All offending field names, missing first.'''
    return self.missing + self.invalid
