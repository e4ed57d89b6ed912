__author__ = 'robert'

import codecs
import logging

from turtle_reader.errors import StreamIOError
from turtle_reader.parser.scanner import BlockScanner, is_statement_boundary

CHUNK_SIZE = 8192


def iter_chars(stream, encoding="utf-8"):
    """
    Reads the stream chunk wise and yields single characters. Binary streams are decoded
    with the given encoding.
    :param stream: a readable text or binary stream
    :param encoding: used if the stream returns bytes
    """
    decoder = None
    while True:
        try:
            chunk = stream.read(CHUNK_SIZE)
            if isinstance(chunk, bytes):
                if decoder is None:
                    decoder = codecs.getincrementaldecoder(encoding)()
                chunk = decoder.decode(chunk, final=not chunk)
        except (OSError, UnicodeDecodeError, LookupError) as why:
            raise StreamIOError("cannot read input stream: {}".format(why)) from why

        if not chunk:
            break
        yield from chunk


def split_statements(stream, encoding="utf-8"):
    """
    Splits the stream into statements, i.e. ranges of chars delimited by a dot which is not contained
    in a block. Whitespace outside of blocks is collapsed to a single space.
    An unterminated statement at the end of the stream is discarded.
    :param stream: a readable text or binary stream
    :return: yields the trimmed statements in source order, each including its terminating dot
    """
    scanner = BlockScanner(is_statement_boundary)
    buffer = []
    for char in iter_chars(stream, encoding):
        in_block = scanner.in_block
        boundary = scanner.feed(char)

        if char.isspace() and not in_block:
            if buffer and buffer[-1] != " ":
                buffer.append(" ")
        else:
            buffer.append(char)

        if boundary:
            yield "".join(buffer).strip()
            buffer = []

    if scanner.in_block:
        logging.warning("input ends inside an unterminated block")
    rest = "".join(buffer).strip()
    if rest:
        logging.warning("discarding unterminated statement at end of input: %r", rest)
