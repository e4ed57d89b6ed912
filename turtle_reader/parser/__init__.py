__author__ = 'robert'

from turtle_reader.parser.scanner import BlockScanner, is_statement_boundary, is_token_boundary
from turtle_reader.parser.statements import split_statements
from turtle_reader.parser.tokens import split_tokens
from turtle_reader.parser.prefix import PrefixRegistry, parse_prefix, is_prefix_statement
from turtle_reader.parser.triples import extract_triples
from turtle_reader.parser.qualifier import qualify, qualify_triple
