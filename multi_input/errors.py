"""
Errors raised while reading the concatenated stream.

End of stream is not an error: it is a read of zero bytes.
"""

__all__ = [
  "MultiInputError",
  "SourceOpenError",
  "SourceReadError",
]


class MultiInputError(OSError):
  """Base class. Carries the source involved and the errno of the underlying failure."""

  def __init__(self, source, cause):
    super().__init__(cause.errno, cause.strerror or str(cause), str(source))
    self.source = source


class SourceOpenError(MultiInputError):
  """The source could not be opened (missing, permission denied, ...)."""


class SourceReadError(MultiInputError):
  """The open source failed while being read."""
