__author__ = 'robert'

from rdflib import URIRef, Literal
from rdflib.parser import Parser
from rdflib.plugin import register

from turtle_reader.reader import TurtleReader

FORMAT = "turtlelite"


def to_term(value):
    """
    Maps a qualified triple field to a rdflib term.
    :param value: a quoted literal or an URI
    :return: Literal or URIRef
    """
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return Literal(value[1:-1])
    return URIRef(value)


class TurtleLiteParser(Parser):
    """
    rdflib parser plugin for the turtle subset understood by TurtleReader.
    Usage: Graph().parse(source, format="turtlelite")
    """

    def parse(self, source, sink, **kwargs):
        stream = source.getCharacterStream() or source.getByteStream()
        reader = TurtleReader(stream, strict=kwargs.get("strict", True),
                              encoding=kwargs.get("encoding", "utf-8"))

        for label, uri in reader.prefixes.items():
            sink.bind(label, URIRef(uri))
        for s, p, o in reader.get_triples(fully_qualify=True):
            sink.add((to_term(s), to_term(p), to_term(o)))


register(FORMAT, Parser, __name__, "TurtleLiteParser")
