from multi_input.errors import MultiInputError, SourceOpenError, SourceReadError
from multi_input.failing_stream import FailingStream
from multi_input.io_strategy import IoStrategy, StdIoStrategy
from multi_input.multi_source_reader import MultiSourceReader
from multi_input.sources import STDIN_NAME, NamedFile, Stdin, make_source_list
