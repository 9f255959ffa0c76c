"""Tests for dotgraph.dot — identifier escaping and the DOT text layout."""

import pytest

from dotgraph import Arrow, Digraph, Edge, Graph
from dotgraph.dot import export_identifier, format_attributes


class TestExportIdentifier:
    @pytest.mark.parametrize(
        "identifier,expected",
        [
            ("a", "a"),
            ("_private1", "_private1"),
            ("a:b", "a:b"),
            ("node1:n:sw", "node1:n:sw"),
            ("42", "42"),
            ("-1.5", "-1.5"),
            (".5", ".5"),
            ("3.", "3."),
        ],
    )
    def test_plain_segments_unquoted(self, identifier, expected):
        assert export_identifier(identifier) == expected

    def test_space_is_quoted(self):
        assert export_identifier("my node") == '"my node"'

    def test_inner_quotes_escaped(self):
        assert export_identifier('say "hi"') == '"say \\"hi\\""'

    def test_backslash_left_alone(self):
        assert export_identifier("line\\nbreak") == '"line\\nbreak"'

    def test_each_colon_segment_escaped_separately(self):
        assert export_identifier("my node:n") == '"my node":n'
        assert export_identifier("a:b c") == 'a:"b c"'

    def test_empty_string(self):
        assert export_identifier("") == '""'

    def test_empty_segment(self):
        assert export_identifier("a:") == 'a:""'

    def test_leading_digit_is_quoted(self):
        assert export_identifier("1abc") == '"1abc"'

    def test_hyphen_is_quoted(self):
        assert export_identifier("a-b") == '"a-b"'

    @pytest.mark.parametrize("keyword", ["node", "edge", "graph", "digraph", "subgraph", "strict", "Node"])
    def test_keywords_are_quoted(self, keyword):
        assert export_identifier(keyword) == f'"{keyword}"'


class TestFormatAttributes:
    def test_empty(self):
        assert format_attributes({}) == ""

    def test_pairs_in_insertion_order(self):
        assert format_attributes({"color": "blue", "label": "A to B"}) == '[color=blue, label="A to B"]'


class TestGraphOutput:
    def test_empty_undirected(self):
        assert Graph("G").to_dot() == "strict graph G {\n}\n"

    def test_empty_directed(self):
        assert Digraph("G").to_dot() == "strict digraph G {\n}\n"

    def test_unnamed_graph(self):
        assert Graph().to_dot() == 'strict graph "" {\n}\n'

    def test_str_matches_to_dot(self):
        g = Graph("G")
        g.add_edge(Edge("a", "b"))
        assert str(g) == g.to_dot()

    def test_directed_edge_with_label(self):
        g = Digraph("G")
        g.add_edge(Arrow("a", "b"), label="X")
        assert "a -> b [label=X];" in g.to_dot()

    def test_quoted_label(self):
        g = Digraph("G")
        g.add_edge(Arrow("a", "b"), label="A to B")
        assert 'a -> b [label="A to B"];' in g.to_dot()

    def test_undirected_edge_token(self):
        g = Graph("G")
        g.add_edge(Edge("a", "b"))
        assert g.to_dot() == "strict graph G {\na -- b;\n}\n"

    def test_statement_order(self):
        g = Digraph("G")
        g.add_edge(Arrow("a", "b"))
        g.add_node("c", color="blue", shape="box")
        g["fontsize"] = "32"
        g["label"] = "Test Graph"
        assert g.to_dot() == (
            "strict digraph G {\n"
            "fontsize=32;\n"
            'label="Test Graph";\n'
            "c [color=blue, shape=box];\n"
            "a -> b;\n"
            "}\n"
        )

    def test_node_without_attributes(self):
        g = Graph("G")
        g.add_node("lonely")
        assert g.to_dot() == "strict graph G {\nlonely;\n}\n"

    def test_escaped_node_and_edge(self):
        g = Graph("G")
        g.add_node("my node", label='say "hi"')
        g.add_edge(Edge("my node", "port:n"))
        out = g.to_dot()
        assert '"my node" [label="say \\"hi\\""];\n' in out
        assert '"my node" -- port:n;\n' in out

    def test_deterministic(self):
        g = Digraph("G")
        for i in range(20):
            g.add_edge(Arrow(f"n{i}", f"n{i + 1}"), weight=str(i))
        assert g.to_dot() == g.to_dot()


class TestSubgraphOutput:
    def _build(self):
        root = Digraph("G")
        sub = root.subgraph("cluster_0")
        sub["label"] = "inner"
        sub.add_edge(Arrow("x", "y"))
        root.add_edge(Arrow("a", "b"))
        return root, sub

    def test_nested_in_parent(self):
        root, _ = self._build()
        assert root.to_dot() == (
            "strict digraph G {\n"
            "subgraph cluster_0 {\n"
            "label=inner;\n"
            "x -> y;\n"
            "}\n"
            "a -> b;\n"
            "}\n"
        )

    def test_standalone(self):
        _, sub = self._build()
        assert sub.to_dot() == "strict digraph cluster_0 {\nlabel=inner;\nx -> y;\n}\n"

    def test_deep_nesting(self):
        root = Graph("G")
        mid = root.subgraph("mid")
        leaf = mid.subgraph("leaf")
        leaf.add_node("z")
        assert root.to_dot() == "strict graph G {\nsubgraph mid {\nsubgraph leaf {\nz;\n}\n}\n}\n"

    def test_siblings_keep_creation_order(self):
        root = Graph("G")
        root.subgraph("first")
        root.subgraph("second")
        out = root.to_dot()
        assert out.index("subgraph first") < out.index("subgraph second")

    def test_unnamed_subgraph(self):
        root = Graph("G")
        root.subgraph()
        assert 'subgraph "" {\n}\n' in root.to_dot()
