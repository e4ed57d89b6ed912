__author__ = 'robert'

import logging
import re
from urllib.parse import urlsplit, unquote

from turtle_reader.parser.qualifier import strip_brackets

WORD_CHAR = re.compile(r"\w")


def uri_components(uri):
    """
    host + path + query + fragment of the uri, unescaped
    """
    parts = urlsplit(uri)
    value = parts.hostname or ""
    value += parts.path
    if parts.query:
        value += "?" + parts.query
    if parts.fragment:
        value += "#" + parts.fragment
    return unquote(value)


class PrologGenerator:
    """
    Writes the triples as prolog facts: ``predicate(subject, object).``
    """

    def __init__(self, **kwargs):
        self.lowercase_first = kwargs.pop("lowercase_first", True)

    def generate(self, triples, output_path):
        facts = self.render(triples)
        logging.info("Writing prolog facts to file: {}".format(output_path))
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(facts)

    def render(self, triples):
        return "\n".join("{}({}, {}).".format(self.sanitize_identifier(t.predicate),
                                              self.sanitize_identifier(t.subject),
                                              self.sanitize_identifier(t.object))
                         for t in triples)

    def sanitize_identifier(self, identifier):
        """
        Turns an identifier into a prolog friendly name. URIs in angle brackets are reduced to
        their host, path, query and fragment, non word chars are dropped and the char following
        them is upper cased.
        :param identifier: a triple field
        :return: the camel cased atom
        """
        if identifier.startswith("<") and identifier.endswith(">"):
            identifier = uri_components(strip_brackets(identifier))

        chars = []
        upper_next = False
        for c in identifier:
            if not WORD_CHAR.match(c):
                upper_next = True
                continue
            if upper_next:
                c = c.upper()
                upper_next = False
            chars.append(c)

        name = "".join(chars)
        if self.lowercase_first and name:
            name = name[0].lower() + name[1:]
        return name
