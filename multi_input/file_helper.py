import io
import logging
import os
import shutil

from chardet import UniversalDetector

from multi_input.multi_source_reader import MultiSourceReader

for handler in logging.root.handlers[:]:
  logging.root.removeHandler(handler)
logging.basicConfig(
  level=logging.DEBUG,
  format="%(levelname)s:%(asctime)s:%(module)s:%(lineno)d %(message)s")
logging.getLogger('chardet').setLevel(logging.WARNING)
logging.getLogger('charsetgroupprober').setLevel(logging.WARNING)
logging.getLogger("charsetgroupprober").propagate = False
logging.getLogger('sbcharsetprober').setLevel(logging.WARNING)
logging.getLogger("sbcharsetprober").propagate = False

DEFAULT_ENCODING = "utf-8"
MIN_CONFIDENCE = 0.2


def detect_encoding(data):
  """Guess the encoding of a byte prefix. None if there is nothing to go on, or chardet is unsure."""
  if not data:
    return None
  detector = UniversalDetector()
  detector.reset()
  for line in data.splitlines(keepends=True):
    detector.feed(line)
    if detector.done: break
  detector.close()
  if (detector.result["confidence"] or 0) < MIN_CONFIDENCE:
    return None
  return detector.result["encoding"]


def open_text(names=(), encoding=None, errors="strict", io_strategy=None):
  """
  Open the concatenation of the given files for reading text, line by line.

    for line in open_text(["a.txt", "b.txt"]):
      ...

  :param names: File names, read in order. Empty means stdin.
  :param encoding: If None, guessed from the start of the stream (utf-8 if nothing can be guessed). This opens the first file right away.
  :return: io.TextIOWrapper
  """
  reader = MultiSourceReader(names=names, io_strategy=io_strategy)
  buffered = io.BufferedReader(reader)
  if encoding is None:
    encoding = detect_encoding(buffered.peek(io.DEFAULT_BUFFER_SIZE)) or DEFAULT_ENCODING
    logging.debug("Reading %s as %s", ", ".join(map(str, reader.sources)), encoding)
  return io.TextIOWrapper(buffered, encoding=encoding, errors=errors)


def concatenate_files(names, output_path, io_strategy=None):
  """Write the files, one after another, into output_path. Returns the number of bytes written."""
  os.makedirs(os.path.dirname(os.path.abspath(output_path)), exist_ok=True)
  with MultiSourceReader(names=names, io_strategy=io_strategy) as reader:
    with open(output_path, 'wb') as outfile:
      shutil.copyfileobj(reader, outfile)
      count = outfile.tell()
  logging.info("Wrote %d bytes from %d sources to %s", count, len(reader.sources), output_path)
  return count
