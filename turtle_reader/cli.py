__author__ = 'robert'

import argparse
import logging
import sys
from enum import Enum

from rdflib.exceptions import ParserError

from turtle_reader.errors import StreamIOError
from turtle_reader.generator import GraphGenerator, PrologGenerator
from turtle_reader.reader import TurtleReader


class ReaderType(Enum):
    TURTLE = "turtle"

    def open(self, location, **kwargs):
        """
        Creates the reader for a file path or an http(s) url
        """
        if location.startswith(("http://", "https://")):
            return TurtleReader.from_url(location, **kwargs)
        try:
            with open(location, "rb") as f:
                return TurtleReader(f, **kwargs)
        except OSError as why:
            raise StreamIOError("cannot open {}: {}".format(location, why)) from why


class GeneratorType(Enum):
    GRAPH = "graph"
    PROLOG = "prolog"

    def create(self):
        if self is GeneratorType.GRAPH:
            return GraphGenerator()
        return PrologGenerator()


def build_arg_parser():
    parser = argparse.ArgumentParser(prog="turtle-reader",
                                     description="Converts a turtle file into a graph page or prolog facts")
    parser.add_argument("-i", "--input", required=True, help="Specifies the location of the input file")
    parser.add_argument("-o", "--output", required=True, help="Override the output file")
    parser.add_argument("-q", "--qualify", action="store_true",
                        help="Replace known prefixes with their fully qualified URIs")
    parser.add_argument("-g", "--generator", required=True, type=str.lower,
                        choices=[t.value for t in GeneratorType],
                        help="Specifies which generator should be used")
    parser.add_argument("-r", "--reader", type=str.lower, default=ReaderType.TURTLE.value,
                        choices=[t.value for t in ReaderType], help=argparse.SUPPRESS)
    parser.add_argument("--lenient", action="store_true", help="Skip malformed prefix declarations")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv=None):
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    reader_type = ReaderType(args.reader)
    generator = GeneratorType(args.generator).create()
    try:
        reader = reader_type.open(args.input, strict=not args.lenient)
        generator.generate(reader.get_triples(args.qualify), args.output)
    except (StreamIOError, ParserError, OSError) as why:
        print("[ERROR] {}".format(why), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
