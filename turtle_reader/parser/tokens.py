__author__ = 'robert'

from turtle_reader.parser.scanner import BlockScanner, is_token_boundary


def split_tokens(statement):
    """
    Splits the statement by whitespace and dots which are not part of URIs or literals.
    The dot (or any other char) that ends a token stays part of it.
    :param statement: one statement as produced by split_statements
    :return: yields the trimmed, non empty tokens
    """
    scanner = BlockScanner(is_token_boundary)
    token = []
    for char in statement:
        token.append(char)
        if scanner.feed(char):
            value = "".join(token).strip()
            if value:
                yield value
            token = []

    value = "".join(token).strip()
    if value:
        yield value
