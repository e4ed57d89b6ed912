__author__ = 'robert'

from collections.abc import Mapping

from turtle_reader.errors import FormatError, DuplicatePrefixError

PREFIX_KEYWORD = "@prefix"


def is_prefix_statement(statement):
    return statement.startswith(PREFIX_KEYWORD)


def _is_word_char(char):
    return char.isalnum() or char == "_"


def _skip_whitespace(statement, pos):
    while pos < len(statement) and statement[pos].isspace():
        pos += 1
    return pos


def parse_prefix(statement):
    """
    Interprets the statement as a prefix declaration: ``@prefix label:<uri>.``
    The label is the run of word chars up to the colon, the uri everything between
    ``<`` and the following ``>``. Whitespace is allowed before the uri and the dot.
    :param statement: the turtle encoded prefix
    :return: (label, uri)
    :raises FormatError: if the statement does not match
    """
    if not is_prefix_statement(statement):
        raise FormatError(statement, "not a prefix declaration")

    pos = len(PREFIX_KEYWORD)
    start = _skip_whitespace(statement, pos)
    if start == pos:
        raise FormatError(statement, "missing whitespace after @prefix")

    pos = start
    while pos < len(statement) and _is_word_char(statement[pos]):
        pos += 1
    label = statement[start:pos]
    if not label or not statement.startswith(":", pos):
        raise FormatError(statement, "missing prefix label")

    pos = _skip_whitespace(statement, pos + 1)
    if not statement.startswith("<", pos):
        raise FormatError(statement, "missing prefix uri")
    end = statement.find(">", pos + 1)
    uri = statement[pos + 1:end]
    if end < 0 or not uri:
        raise FormatError(statement, "missing prefix uri")

    pos = _skip_whitespace(statement, end + 1)
    if statement[pos:] != ".":
        raise FormatError(statement, "prefix uri must be followed by '.'")

    return label, uri


class PrefixRegistry(Mapping):
    """
    Memoizes the prefixes defined in a turtle source. Labels are unique, a label can not be
    registered twice.
    """

    def __init__(self):
        self._prefixes = dict()

    def register(self, label, uri):
        if label in self._prefixes:
            raise DuplicatePrefixError(label, uri)
        self._prefixes[label] = uri

    def register_statement(self, statement):
        label, uri = parse_prefix(statement)
        self.register(label, uri)
        return label

    def __getitem__(self, label):
        return self._prefixes[label]

    def __iter__(self):
        return iter(self._prefixes)

    def __len__(self):
        return len(self._prefixes)

    def __repr__(self):
        return "PrefixRegistry({!r})".format(self._prefixes)
