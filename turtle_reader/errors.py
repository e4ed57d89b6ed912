__author__ = 'robert'

from rdflib.exceptions import ParserError


class StreamIOError(IOError):
    """
    The character stream could not be read. Aborts the construction of a reader.
    """


class FormatError(ParserError):
    """
    A @prefix statement does not have the shape ``@prefix label:<uri>.``
    """

    def __init__(self, statement, reason="malformed prefix declaration"):
        self.statement = statement
        super(FormatError, self).__init__("{}: {!r}".format(reason, statement))


class DuplicatePrefixError(ParserError):

    def __init__(self, label, uri=None):
        self.label = label
        self.uri = uri
        super(DuplicatePrefixError, self).__init__("prefix {!r} is already registered".format(label))
