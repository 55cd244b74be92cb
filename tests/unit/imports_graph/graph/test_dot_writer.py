# tests/unit/imports_graph/graph/test_dot_writer.py
# AI-Mind (c) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""Tests for DOT generation from the directory tree and edges."""

from imports_graph.graph import DotOptions, Edge, render_dot
from imports_graph.graph.dot import cluster_names, escape, subgraph_name


class TestRenderDot:
    """Tests for render_dot output structure."""

    def test_empty_graph(self):
        """No files still produces the header and a closing brace."""
        result = render_dot({}, [], {})

        lines = result.splitlines()
        assert lines[0] == "strict digraph imports {"
        assert 'rankdir="LR"' in lines[1]
        assert lines[2] == "\tnode [shape=box, fontsize=16, color=blue];"
        assert lines[3] == "\tedge [fontsize=12, color=blue];"
        assert lines[-1] == "}"
        assert "clusterrank" not in result

    def test_full_output_two_clusters(self):
        tree = {"a": {"a/x.ts": None}, "b": {"b/y.ts": None}}
        edges = [Edge("a/x.ts", "b/y.ts", ("y",))]
        heights = {"a/x.ts": 0.875, "b/y.ts": 0.875}

        result = render_dot(tree, edges, heights)

        assert result == (
            "strict digraph imports {\n"
            '\tgraph [ rankdir="LR"; labelloc="b"; concentrate=true; overlap=false; splines=true; color=blue]\n'
            "\tnode [shape=box, fontsize=16, color=blue];\n"
            "\tedge [fontsize=12, color=blue];\n"
            "\tsubgraph cluster_a {\n"
            '\t\tlabel = "a"; fontsize=24;\n'
            '\t\t"a/x.ts"[label="x.ts"; height=0.875; href="a/x.ts"; tooltip="a/x.ts"];\n'
            "\t}\n"
            "\tsubgraph cluster_b {\n"
            '\t\tlabel = "b"; fontsize=24;\n'
            '\t\t"b/y.ts"[label="y.ts"; height=0.875; href="b/y.ts"; tooltip="b/y.ts"];\n'
            "\t}\n"
            '\t"a/x.ts" -> "b/y.ts" [label="y"];\n'
            "}\n"
        )

    def test_root_files_outside_clusters(self):
        result = render_dot({"a.ts": None}, [], {"a.ts": 0.5})

        assert "subgraph" not in result
        assert '\t"a.ts"[label="a.ts"; height=0.5; href="a.ts"; tooltip="a.ts"];' in result

    def test_nested_clusters_indent_and_balance(self):
        tree = {"a": {"b": {"a/b/c.ts": None}, "a/d.ts": None}}

        result = render_dot(tree, [], {})

        assert "\tsubgraph cluster_a {" in result
        assert "\t\tsubgraph cluster_a_b {" in result
        assert '\t\t\t"a/b/c.ts"[label="c.ts"; height=0.5;' in result
        assert result.count("{") == result.count("}")

    def test_missing_height_defaults_to_minimum(self):
        result = render_dot({"a.ts": None}, [], {})

        assert "height=0.5;" in result

    def test_no_dir_adds_cluster_rank(self):
        result = render_dot({}, [], {}, DotOptions(no_dir=True))

        assert '\tclusterrank="none";' in result.splitlines()

    def test_colliding_directory_names_stay_separate(self):
        tree = {"a-b": {"a-b/x.ts": None}, "a_b": {"a_b/y.ts": None}}

        lines = render_dot(tree, [], {}).splitlines()

        assert "\tsubgraph cluster_a_b {" in lines
        assert "\tsubgraph cluster_a_b_2 {" in lines

    def test_edges_after_all_clusters(self):
        tree = {"a": {"a/x.ts": None}, "b": {"b/y.ts": None}}
        edges = [Edge("a/x.ts", "b/y.ts", ("y",))]

        lines = render_dot(tree, edges, {}).splitlines()

        edge_index = next(i for i, line in enumerate(lines) if "->" in line)
        last_cluster_close = max(i for i, line in enumerate(lines) if line == "\t}")
        assert edge_index > last_cluster_close
        assert lines[edge_index].startswith("\t\"")


class TestRenderEdges:
    """Tests for edge statements."""

    def test_empty_label_omitted(self):
        result = render_dot({}, [Edge("a.ts", "b.ts", ())], {})

        assert '\t"a.ts" -> "b.ts";' in result.splitlines()
        assert "label=\"\"" not in result

    def test_reverse_swaps_direction(self):
        edges = [Edge("a.ts", "b.ts", ("b",))]

        result = render_dot({}, edges, {}, DotOptions(reverse=True))

        assert '"b.ts" -> "a.ts" [label="b"];' in result
        assert '"a.ts" -> "b.ts"' not in result

    def test_merged_label_uses_dot_line_break(self):
        edges = [Edge("a.ts", "b.ts", ("A", "B"))]

        result = render_dot({}, edges, {})

        assert '[label="A\\nB"]' in result

    def test_self_loop(self):
        result = render_dot({"a.ts": None}, [Edge("a.ts", "a.ts", ("a",))], {})

        assert '"a.ts" -> "a.ts" [label="a"];' in result

    def test_quotes_escaped_everywhere(self):
        tree = {'we"ird': {'we"ird/f"ile.ts': None}}
        edges = [Edge('we"ird/f"ile.ts', 'we"ird/f"ile.ts', ('"q"',))]

        result = render_dot(tree, edges, {})

        assert 'label = "we\\"ird"' in result
        assert '"we\\"ird/f\\"ile.ts"[label="f\\"ile.ts";' in result
        assert 'href="we\\"ird/f\\"ile.ts"; tooltip="we\\"ird/f\\"ile.ts"' in result
        assert '[label="\\"q\\""]' in result
        assert "cluster_we_ird" in result


class TestHelpers:
    """Tests for name sanitizing and escaping."""

    def test_subgraph_name_replaces_non_word(self):
        assert subgraph_name("ui-components/forms") == "cluster_ui_components_forms"
        assert subgraph_name("a.b c") == "cluster_a_b_c"

    def test_subgraph_name_non_ascii(self):
        assert subgraph_name("données") == "cluster_donn_es"

    def test_cluster_names_follow_paths(self):
        tree = {"a": {"b": {"a/b/c.ts": None}}, "d.ts": None}

        assert cluster_names(tree) == {"a": "cluster_a", "a/b": "cluster_a_b"}

    def test_cluster_names_suffix_collisions(self):
        tree = {
            "a": {"b": {"a/b/x.ts": None}},
            "a-b": {"a-b/y.ts": None},
            "a_b": {"a_b/z.ts": None},
            "a_b_2": {"a_b_2/w.ts": None},
        }

        names = cluster_names(tree)

        assert names == {
            "a": "cluster_a",
            "a/b": "cluster_a_b",
            "a-b": "cluster_a_b_2",
            "a_b": "cluster_a_b_3",
            "a_b_2": "cluster_a_b_2_2",
        }
        assert len(set(names.values())) == len(names)

    def test_escape_backslash_before_quote(self):
        assert escape('a\\"b') == 'a\\\\\\"b'

    def test_escape_newline(self):
        assert escape("A\nB") == "A\\nB"
