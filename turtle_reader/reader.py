__author__ = 'robert'

import logging
from io import BytesIO
from types import MappingProxyType

import requests

from turtle_reader.errors import FormatError, StreamIOError
from turtle_reader.parser import (PrefixRegistry, extract_triples, is_prefix_statement, qualify_triple,
                                  split_statements, split_tokens)

TURTLE_MIME = "text/turtle"


class TurtleReader:
    """
    Converts a stream of characters in turtle notation into a sequence of triples.
    The whole stream is consumed when the reader is created, afterwards the reader is read only.
    """

    def __init__(self, stream, **kwargs):
        """
        Creates a new reader by consuming the stream and parsing the statements encoded in it.
        :param stream: a readable text or binary stream of a turtle file
        :param kwargs: {strict: raise on malformed prefixes (default) or skip them,
                        encoding: used for binary streams, default utf-8}
        """
        self.strict = kwargs.pop("strict", True)
        self.encoding = kwargs.pop("encoding", "utf-8")
        if kwargs:
            raise TypeError("unexpected options: {}".format(", ".join(sorted(kwargs))))

        self._prefixes = PrefixRegistry()
        triples = []
        n = 0
        for n, statement in enumerate(split_statements(stream, self.encoding), 1):
            if is_prefix_statement(statement):
                self._register_prefix(statement)
                continue

            statement_triples = list(extract_triples(split_tokens(statement)))
            if not statement_triples:
                logging.debug("statement without predicate/object pair: %r", statement)
            triples.extend(statement_triples)

        self._triples = tuple(triples)
        logging.debug("{} statements parsed, {} triples, {} prefixes".format(n, len(self._triples),
                                                                             len(self._prefixes)))

    @classmethod
    def from_url(cls, url, **kwargs):
        """
        Fetches a turtle document over http and parses it.
        :param url: the document location
        :param kwargs: {timeout: seconds, default 30} the rest is passed to the constructor
        :return: TurtleReader
        """
        timeout = kwargs.pop("timeout", 30)
        try:
            r = requests.get(url, timeout=timeout, headers={"Accept": TURTLE_MIME,
                                                            'Accept-Encoding': 'gzip,deflate'})
            r.raise_for_status()
            content = r.content
        except requests.RequestException as why:
            raise StreamIOError("cannot fetch {}: {}".format(url, why)) from why
        return cls(BytesIO(content), **kwargs)

    def _register_prefix(self, statement):
        try:
            label = self._prefixes.register_statement(statement)
        except FormatError as why:
            if self.strict:
                raise
            logging.warning("skipping prefix: %s", why)
            return
        logging.debug("prefix %s registered", label)

    @property
    def prefixes(self):
        """
        The prefixes declared in the source, label -> base uri
        """
        return MappingProxyType(self._prefixes)

    def get_triples(self, fully_qualify=False):
        """
        Provides the parsed content of the turtle source. If specified, any abbreviated URIs will be fully
        qualified using the prefixes declared in the source.
        :param fully_qualify: replace known prefixes and strip the angle brackets of URIs
        :return: tuple of Triple, in source order
        """
        if not fully_qualify:
            return self._triples
        return tuple(qualify_triple(triple, self._prefixes) for triple in self._triples)

    def __iter__(self):
        return iter(self._triples)

    def __len__(self):
        return len(self._triples)
