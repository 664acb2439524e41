import os
from dataclasses import dataclass

STDIN_NAME = "-"


@dataclass(frozen=True)
class Stdin(object):
  """The process's standard input."""

  def __str__(self):
    return "<stdin>"


@dataclass(frozen=True)
class NamedFile(object):
  path: str

  def __str__(self):
    return self.path


def to_source(name):
  if isinstance(name, (Stdin, NamedFile)):
    return name
  name = os.fspath(name)
  if isinstance(name, bytes):
    name = os.fsdecode(name)
  if name == STDIN_NAME:
    return Stdin()
  return NamedFile(name)


def make_source_list(names=()):
  """
  Turn file names into an immutable tuple of sources.

  An empty list means standard input, as does the name "-" anywhere in the list.
  :param names: A single name, or an ordered iterable of names (str, os.PathLike, Stdin or NamedFile).
  :return: tuple of Stdin / NamedFile, in the given order.
  """
  if isinstance(names, (str, bytes, os.PathLike, Stdin, NamedFile)):
    names = [names]
  sources = tuple(to_source(name) for name in names)
  if len(sources) == 0:
    return (Stdin(),)
  return sources
