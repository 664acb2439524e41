import io
import logging

from multi_input.errors import SourceOpenError, SourceReadError
from multi_input.io_strategy import StdIoStrategy
from multi_input.sources import make_source_list


class MultiSourceReader(io.RawIOBase):
  """
  Reads a list of files one after another, as if they were one file.

  With no file names (or the name "-"), standard input is read. Files are opened lazily, one at a time, and closed as soon as they are used up.
  Wrap in io.BufferedReader / io.TextIOWrapper for buffered or line-wise reading.
  """

  def __init__(self, names=(), io_strategy=None):
    """

    :param names: Ordered file names. Empty means stdin.
    :param io_strategy: An IoStrategy; defaults to StdIoStrategy (real files, sys.stdin).
    """
    super().__init__()
    self.sources = make_source_list(names)
    self.io_strategy = io_strategy if io_strategy is not None else StdIoStrategy()
    self._cursor = 0
    self._handle = None

  def __enter__(self):
    return self

  def __exit__(self, exc_type, exc_val, exc_tb):
    self.close()
    return False

  @property
  def cursor(self):
    """Index of the next source to open."""
    return self._cursor

  @property
  def current_source(self):
    """The source being read, or None before the first read and after the last source is used up."""
    if self._handle is None:
      return None
    return self.sources[self._cursor - 1]

  def close(self):
    try:
      if self._handle is not None:
        self._release()
    finally:
      super().close()

  def isatty(self):
    return False

  def readable(self):
    return True

  def seekable(self):
    return False

  def writable(self):
    return False

  def readinto(self, buffer):
    if self.closed:
      raise ValueError("I/O operation on closed file.")
    view = memoryview(buffer).cast("B")
    if len(view) == 0:
      return 0
    while True:
      if self._handle is None:
        if self._cursor >= len(self.sources):
          return 0
        self._open_next()
      source = self.sources[self._cursor - 1]
      try:
        count = _read_into(self._handle, view)
      except OSError as e:
        raise SourceReadError(source=source, cause=e) from e
      if count is None or count > 0:
        return count
      self._release()

  def _open_next(self):
    source = self.sources[self._cursor]
    # Advance first: a source that fails to open is not tried again.
    self._cursor += 1
    logging.debug("Opening %s", source)
    try:
      self._handle = self.io_strategy.open_source(source)
    except OSError as e:
      raise SourceOpenError(source=source, cause=e) from e

  def _release(self):
    handle = self._handle
    self._handle = None
    source = self.sources[self._cursor - 1]
    try:
      self.io_strategy.release(source, handle)
    except OSError as e:
      raise SourceReadError(source=source, cause=e) from e


def _read_into(handle, view):
  if hasattr(handle, "readinto"):
    return handle.readinto(view)
  data = handle.read(len(view))
  if data is None:
    return None
  view[:len(data)] = data
  return len(data)
