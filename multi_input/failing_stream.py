import io


class FailingStream(io.RawIOBase):
  """
  A stream which fails upon read or write.

  Each read or write raises error_class(message), repeat_count times. After that, reads hit end of file and writes accept nothing.
  A negative repeat_count fails forever.
  Handy as a source, served by a custom IoStrategy, when checking that a consumer copes with I/O errors.
  """

  def __init__(self, error_class=OSError, message="Failing", repeat_count=-1):
    super().__init__()
    self.error_class = error_class
    self.message = message
    self.repeat_count = repeat_count

  def _fail(self):
    if self.repeat_count == 0:
      return 0
    if self.repeat_count > 0:
      self.repeat_count -= 1
    raise self.error_class(self.message)

  def readable(self):
    return True

  def writable(self):
    return True

  def readinto(self, buffer):
    return self._fail()

  def write(self, data):
    return self._fail()

  def flush(self):
    pass
