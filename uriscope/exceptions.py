# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exception classes raised by the codecs.
Exhausting a decode iteration limit is not an error; the last computed value is returned instead.
'''


class UriscopeError(ValueError):
  'Base class for transformation failures.'


class InvalidPercentSequence(UriscopeError):
  '''
  Raised by strict-mode codecs when a '%' is not followed by two hex digits.
  `sequence` is the (possibly truncated) three-character slice starting at the '%'.
  '''
  def __init__(self, text:str, index:int) -> None:
    self.text = text
    self.index = index
    self.sequence = text[index:index+3]
    super().__init__(f'Invalid percent sequence at index {index}: {self.sequence!r}')


class DomainConversionFailure(UriscopeError):
  'Raised when the IDNA converter rejects a domain label.'
  def __init__(self, host:str, label:str, reason:str) -> None:
    self.host = host
    self.label = label
    self.reason = reason
    super().__init__(f'domain conversion failed for label {label!r} of {host!r}: {reason}')
