"""Tests for markup serialization and the tree dump."""

import unittest

from minihtml import CommentTag, DoctypeTag, MiniHTML, Parameter, Parameters, SoloTag, Tag, Text, to_html, to_test_format


class TestToHtml(unittest.TestCase):
    def test_elements_and_attributes(self):
        """Names come out lower-cased and values keep their case."""
        doc = MiniHTML('<A HREF="x">Go</A>')
        assert doc.to_html() == '<a href="x">Go</a>'

    def test_solo_comment_doctype(self):
        """Declarations and solo tags use their compact forms."""
        nodes = [DoctypeTag("html"), CommentTag(" c "), SoloTag("br")]
        assert to_html(nodes) == "<!DOCTYPE html><!-- c --><br/>"

    def test_value_with_double_quote_uses_single_quotes(self):
        """A value containing a double quote is wrapped in single quotes."""
        node = SoloTag("img", [Parameter("alt", 'say "hi"')])
        assert to_html([node]) == "<img alt='say \"hi\"'/>"

    def test_empty_forest(self):
        assert to_html([]) == ""

    def test_rejects_non_tree_nodes(self):
        """Attribute nodes cannot be serialized on their own."""
        with self.assertRaises(TypeError):
            to_html([Parameters([Parameter("a", "b")])])


class TestRoundTrip(unittest.TestCase):
    """Serialized output parses back to an equal forest."""

    def assert_round_trip(self, html):
        nodes = MiniHTML(html).nodes
        again = MiniHTML(to_html(nodes)).nodes
        assert again == nodes, html

    def test_document(self):
        """A full document survives parse, serialize, parse."""
        self.assert_round_trip(
            "<!DOCTYPE html>\n"
            '<html lang="en">\n'
            "  <body class='main'>\n"
            "    <!-- note -->\n"
            "    <h1>Hello, world</h1>\n"
            "    <img src=\"a.png\" alt='say \"hi\"'/>\n"
            "    <p>one <b>two</b> three</p>\n"
            "  </body>\n"
            "</html>\n"
        )

    def test_text_and_solo_tags(self):
        self.assert_round_trip("hello<br/>world<hr/>")

    def test_comment_with_hyphens(self):
        """Hyphens inside a comment are not mistaken for its terminator."""
        self.assert_round_trip("<!-- a--b - c --->")

    def test_attribute_pairs_survive(self):
        """Attribute name/value pairs are preserved through serialization."""
        html = '<div id="a" data-x="1" title="t"><span class="c">x</span></div>'
        first = MiniHTML(html).nodes[0]
        second = MiniHTML(to_html([first])).nodes[0]
        assert set(first.attrs.items()) == set(second.attrs.items())


class TestTestFormat(unittest.TestCase):
    def test_tree_dump(self):
        """Attributes sit under their element, before its children."""
        doc = MiniHTML('<!DOCTYPE html><div id="x">hi<br/><!--c--></div>')
        assert doc.to_test_format() == "\n".join(
            [
                "| <!DOCTYPE html>",
                "| <div>",
                '|   id="x"',
                '|   "hi"',
                "|   <br/>",
                "|   <!-- c -->",
            ]
        )

    def test_nested_indent(self):
        """Each nesting level indents by two spaces."""
        nodes = [Tag("a", children=[Tag("b", children=[Text("t")])])]
        assert to_test_format(nodes) == '| <a>\n|   <b>\n|     "t"'
