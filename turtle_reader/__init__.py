__author__ = 'robert'

from turtle_reader.errors import StreamIOError, FormatError, DuplicatePrefixError
from turtle_reader.triple import Triple
from turtle_reader.reader import TurtleReader
