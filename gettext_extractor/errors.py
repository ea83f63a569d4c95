class ExtractionError(Exception):
  """Base class for errors raised while extracting messages."""


class NestingTooDeepError(ExtractionError):
  def __init__(self, filename: str, line: int, max_depth: int):
    super().__init__(f"{filename}:{line}: syntax tree nested deeper than {max_depth} node levels")
    self.filename = filename
    self.line = line
    self.max_depth = max_depth
