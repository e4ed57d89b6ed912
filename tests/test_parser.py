__author__ = 'robert'

import unittest
from io import StringIO

from turtle_reader.errors import FormatError, DuplicatePrefixError
from turtle_reader.parser import (BlockScanner, PrefixRegistry, extract_triples, is_statement_boundary,
                                  is_token_boundary, parse_prefix, qualify, split_statements, split_tokens)
from turtle_reader.triple import Triple

EX = "http://example.org/"


class TestBlockScanner(unittest.TestCase):

    def feed_all(self, scanner, text):
        return [scanner.feed(c) for c in text]

    def test_boundary_outside_block(self):
        scanner = BlockScanner(is_statement_boundary)
        self.assertEqual(self.feed_all(scanner, "a.b"), [False, True, False])

    def test_no_boundary_inside_uri(self):
        scanner = BlockScanner(is_statement_boundary)
        self.assertFalse(any(self.feed_all(scanner, "<http://example.org/a.b>")))
        self.assertFalse(scanner.in_block)
        self.assertTrue(scanner.feed("."))

    def test_no_boundary_inside_literal(self):
        scanner = BlockScanner(is_token_boundary)
        self.assertFalse(any(self.feed_all(scanner, '"3 . 14"')))
        self.assertTrue(scanner.feed(" "))

    def test_other_delimiter_is_content(self):
        scanner = BlockScanner(is_token_boundary)
        self.feed_all(scanner, '"a<b')
        self.assertTrue(scanner.in_block)
        self.assertFalse(scanner.feed(">"))
        self.assertTrue(scanner.in_block)
        scanner.feed('"')
        self.assertFalse(scanner.in_block)

    def test_reset(self):
        scanner = BlockScanner(is_token_boundary)
        scanner.feed("<")
        scanner.reset()
        self.assertFalse(scanner.in_block)


class TestSplitStatements(unittest.TestCase):

    def split(self, text):
        return list(split_statements(StringIO(text)))

    def test_dot_in_literal_does_not_split(self):
        self.assertEqual(self.split('<a> <b> "3.14" .'), ['<a> <b> "3.14" .'])

    def test_dot_in_uri_does_not_split(self):
        self.assertEqual(self.split("<http://a.org/x> <http://a.org/p> <http://a.org/o>."),
                         ["<http://a.org/x> <http://a.org/p> <http://a.org/o>."])

    def test_source_order(self):
        self.assertEqual(self.split("<a> <p> <o1> .\n<b> <p> <o2> ."),
                         ["<a> <p> <o1> .", "<b> <p> <o2> ."])

    def test_whitespace_collapsed_outside_blocks(self):
        self.assertEqual(self.split("  <a>\n\t  <p>   <o>\n.\n"), ["<a> <p> <o> ."])

    def test_whitespace_preserved_inside_blocks(self):
        self.assertEqual(self.split('<a> <p> "x  \n y" .'), ['<a> <p> "x  \n y" .'])

    def test_unterminated_statement_discarded(self):
        with self.assertLogs(level="WARNING") as logs:
            self.assertEqual(self.split("<a> <p> <o> .\n<b> <p> <o>"), ["<a> <p> <o> ."])
        self.assertIn("unterminated statement", logs.output[0])

    def test_unterminated_block(self):
        with self.assertLogs(level="WARNING") as logs:
            self.assertEqual(self.split('<a> <p> "open . end'), [])
        self.assertIn("unterminated block", logs.output[0])

    def test_lazy(self):
        statements = split_statements(StringIO("<a> <p> <o> ."))
        self.assertEqual(next(statements), "<a> <p> <o> .")
        self.assertRaises(StopIteration, next, statements)


class TestSplitTokens(unittest.TestCase):

    def test_tokens(self):
        self.assertEqual(list(split_tokens("ex:a ex:b ex:c .")), ["ex:a", "ex:b", "ex:c", "."])

    def test_dot_stays_with_token(self):
        self.assertEqual(list(split_tokens("<a> <p> <o>.")), ["<a>", "<p>", "<o>."])

    def test_literal_with_whitespace(self):
        self.assertEqual(list(split_tokens('<a> <p> "Hello World. Bye" .')),
                         ["<a>", "<p>", '"Hello World. Bye"', "."])

    def test_terminators(self):
        self.assertEqual(list(split_tokens("<a> <p> <o1>, <o2>; <q> <o3> .")),
                         ["<a>", "<p>", "<o1>,", "<o2>;", "<q>", "<o3>", "."])

    def test_trailing_token_without_boundary(self):
        self.assertEqual(list(split_tokens("<a> <p>")), ["<a>", "<p>"])


class TestPrefix(unittest.TestCase):

    def test_parse_compact(self):
        self.assertEqual(parse_prefix("@prefix ex:<http://example.org/>."), ("ex", EX))

    def test_parse_spaced(self):
        self.assertEqual(parse_prefix("@prefix foaf_1: <http://xmlns.com/foaf/0.1/> ."),
                         ("foaf_1", "http://xmlns.com/foaf/0.1/"))

    def test_missing_label(self):
        with self.assertRaises(FormatError) as ctx:
            parse_prefix("@prefix :<http://example.org/>.")
        self.assertEqual(ctx.exception.statement, "@prefix :<http://example.org/>.")
        self.assertIn("@prefix :<http://example.org/>.", str(ctx.exception))

    def test_missing_colon(self):
        self.assertRaises(FormatError, parse_prefix, "@prefix ex <http://example.org/>.")

    def test_missing_uri(self):
        self.assertRaises(FormatError, parse_prefix, "@prefix ex:http://example.org/.")
        self.assertRaises(FormatError, parse_prefix, "@prefix ex:<>.")

    def test_missing_dot(self):
        self.assertRaises(FormatError, parse_prefix, "@prefix ex:<http://example.org/> ex:a.")

    def test_registry(self):
        registry = PrefixRegistry()
        self.assertEqual(registry.register_statement("@prefix ex:<http://example.org/>."), "ex")
        self.assertEqual(registry["ex"], EX)
        self.assertIn("ex", registry)
        self.assertEqual(len(registry), 1)

    def test_duplicate(self):
        registry = PrefixRegistry()
        registry.register("ex", EX)
        with self.assertRaises(DuplicatePrefixError) as ctx:
            registry.register("ex", "http://other.org/")
        self.assertEqual(ctx.exception.label, "ex")
        self.assertEqual(registry["ex"], EX)


class TestExtractTriples(unittest.TestCase):

    def extract(self, statement):
        return list(extract_triples(split_tokens(statement)))

    def test_single(self):
        self.assertEqual(self.extract("ex:a ex:b ex:c ."), [Triple("ex:a", "ex:b", "ex:c")])

    def test_attached_dot(self):
        self.assertEqual(self.extract("<a> <p> <o>."), [Triple("<a>", "<p>", "<o>")])

    def test_semicolon(self):
        self.assertEqual(self.extract("<a> <p1> <o1>; <p2> <o2> ."),
                         [Triple("<a>", "<p1>", "<o1>"), Triple("<a>", "<p2>", "<o2>")])

    def test_detached_semicolon(self):
        self.assertEqual(self.extract("<a> <p1> <o1> ; <p2> <o2> ."),
                         [Triple("<a>", "<p1>", "<o1>"), Triple("<a>", "<p2>", "<o2>")])

    def test_comma(self):
        self.assertEqual(self.extract("<a> <p> <o1>, <o2> ."),
                         [Triple("<a>", "<p>", "<o1>"), Triple("<a>", "<p>", "<o2>")])

    def test_mixed(self):
        self.assertEqual(self.extract('ex:a ex:p ex:o1 , ex:o2 ; ex:q "x; y" .'),
                         [Triple("ex:a", "ex:p", "ex:o1"),
                          Triple("ex:a", "ex:p", "ex:o2"),
                          Triple("ex:a", "ex:q", '"x; y"')])

    def test_subject_only(self):
        self.assertEqual(self.extract("<a> ."), [])

    def test_missing_object(self):
        self.assertEqual(self.extract("<a> <p> ."), [])

    def test_empty(self):
        self.assertEqual(list(extract_triples([])), [])


class TestQualify(unittest.TestCase):

    prefixes = {"ex": EX}

    def test_abbreviated(self):
        self.assertEqual(qualify("ex:a", self.prefixes), EX + "a")

    def test_suffix_verbatim(self):
        self.assertEqual(qualify("ex:a:b%20c", self.prefixes), EX + "a:b%20c")

    def test_unknown_label(self):
        self.assertEqual(qualify("foaf:name", self.prefixes), "foaf:name")

    def test_brackets_stripped(self):
        self.assertEqual(qualify("<http://example.org/a>", self.prefixes), "http://example.org/a")
        self.assertEqual(qualify("<<a>>", self.prefixes), "<a>")

    def test_literal_untouched(self):
        self.assertEqual(qualify('"ex:a"', self.prefixes), '"ex:a"')
        self.assertEqual(qualify('"<a>"', self.prefixes), '"<a>"')


if __name__ == '__main__':
    unittest.main()
