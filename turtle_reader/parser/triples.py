__author__ = 'robert'

from turtle_reader.triple import Triple

#Object terminators: ';' starts a new predicate, ',' another object for the same predicate
#and '.' ends the statement.
TERMINATORS = ";,."
PREDICATE_TERMINATORS = (";", ".")


def _is_control_token(token):
    return not token.strip(TERMINATORS)


def extract_triples(tokens):
    """
    Interprets the tokens of a statement as one subject followed by chained predicate/object pairs.
    A statement without a complete predicate/object pair yields nothing.
    :param tokens: the tokens of one statement, see split_tokens
    :return: yields Triple
    """
    tokens = iter(tokens)
    subject = next(tokens, None)
    if subject is None:
        return

    predicate = None
    for token in tokens:
        if _is_control_token(token):
            # a detached terminator like "<o1> ; <p2>"
            if token.endswith(PREDICATE_TERMINATORS):
                predicate = None
            continue

        if predicate is None:
            predicate = token
            continue

        obj = token[:-1] if token[-1] in TERMINATORS else token
        yield Triple(subject, predicate, obj)

        if token.endswith(PREDICATE_TERMINATORS):
            predicate = None
