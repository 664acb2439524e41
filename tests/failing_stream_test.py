import pytest

from multi_input.failing_stream import FailingStream


def test_fails_then_reports_end_of_file():
  stream = FailingStream(BrokenPipeError, "The dog ate the ethernet cable", 1)
  with pytest.raises(BrokenPipeError, match="The dog ate the ethernet cable"):
    stream.read(4)
  assert stream.read(4) == b""
  assert stream.readinto(bytearray(4)) == 0


def test_fails_given_number_of_times():
  stream = FailingStream(InterruptedError, "Interrupted", 3)
  for _ in range(3):
    with pytest.raises(InterruptedError):
      stream.read(4)
  assert stream.read(4) == b""


def test_write_keeps_failing():
  stream = FailingStream(PermissionError, "Access denied", -1)
  for _ in range(5):
    with pytest.raises(PermissionError, match="Access denied"):
      stream.write(b"abcd")
  stream.flush()


def test_write_after_failures_accepts_nothing():
  stream = FailingStream(OSError, "Failing", 1)
  with pytest.raises(OSError):
    stream.write(b"abcd")
  assert stream.write(b"abcd") == 0
