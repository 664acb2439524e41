import logging
import sys

from multi_input.sources import NamedFile, Stdin


class IoStrategy(object):
  """
  How sources get opened and released. Subclass to read from something other than the file system.
  """

  def open(self, path):
    raise NotImplementedError()

  def stdin(self):
    raise NotImplementedError()

  def open_source(self, source):
    if isinstance(source, Stdin):
      return self.stdin()
    elif isinstance(source, NamedFile):
      return self.open(source.path)
    raise TypeError("Not a source: %r" % (source,))

  def release(self, source, handle):
    # stdin belongs to the process, not to us.
    if isinstance(source, Stdin):
      return
    logging.debug("Closing %s", source)
    handle.close()


class StdIoStrategy(IoStrategy):

  def open(self, path):
    return open(path, "rb")

  def stdin(self):
    return sys.stdin.buffer
