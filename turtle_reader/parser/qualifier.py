__author__ = 'robert'

from turtle_reader.triple import Triple


def strip_brackets(identifier):
    if len(identifier) >= 2 and identifier.startswith("<") and identifier.endswith(">"):
        return identifier[1:-1]
    return identifier


def qualify(identifier, prefixes):
    """
    Ensures that the identifier is either a literal or a fully qualified URI.
    ``label:suffix`` is expanded with the uri registered for label, the suffix is kept verbatim.
    Anything else loses one layer of enclosing angle brackets, literals are returned untouched.
    :param identifier: an URI, a literal or an abbreviated URI
    :param prefixes: mapping label -> base uri
    :return: the qualified identifier
    """
    label, colon, suffix = identifier.partition(":")
    if colon and suffix and label in prefixes:
        return prefixes[label] + suffix
    return strip_brackets(identifier)


def qualify_triple(triple, prefixes):
    return Triple(qualify(triple.subject, prefixes),
                  qualify(triple.predicate, prefixes),
                  qualify(triple.object, prefixes))
