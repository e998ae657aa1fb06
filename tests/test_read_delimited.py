# tests/test_read_delimited.py
import os
import shutil
import tempfile
import unittest

from mapgraph import GraphError, GraphFormatError, GraphLoadError, MapGraph
from mapgraph.formats import iter_records, read_lines, split_fields


TINY_GRAPH = """A B C G H
B C H
C G
"""


class TestSplitFields(unittest.TestCase):

    def test_whitespace_default(self):
        self.assertEqual(split_fields("A  B\tC\n"), ["A", "B", "C"])

    def test_explicit_delimiter(self):
        self.assertEqual(split_fields("A,B,C\n", ","), ["A", "B", "C"])

    def test_multi_character_delimiter(self):
        self.assertEqual(split_fields("JFK :: ORD :: LAX", " :: "), ["JFK", "ORD", "LAX"])

    def test_trailing_and_empty_fields_dropped(self):
        self.assertEqual(split_fields("A,,B,,\r\n", ","), ["A", "B"])

    def test_empty_hub_field_skips_line(self):
        self.assertEqual(split_fields(",A,B\n", ","), [])

    def test_empty_delimiter_rejected(self):
        with self.assertRaises(ValueError):
            split_fields("A B", "")

    def test_empty_line(self):
        self.assertEqual(split_fields("\n", " "), [])
        self.assertEqual(split_fields(""), [])


class TestIterRecords(unittest.TestCase):

    def test_hub_and_neighbors(self):
        records = list(iter_records(["A B C", "solo", "", "B C"]))
        self.assertEqual(records, [
            (1, "A B C", "A", ["B", "C"]),
            (4, "B C", "B", ["C"]),
        ])


class TestBulkLoad(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def write(self, name, text):
        path = os.path.join(self.tmpdir, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        return path

    def test_from_lines_counts_repeated_edge_once(self):
        G = MapGraph.from_lines(["A B C", "B C"], " ")
        self.assertEqual(G.edge_count(), 3)
        self.assertEqual(G.vertex_count(), 3)
        for v, w in [("A", "B"), ("A", "C"), ("B", "C")]:
            self.assertTrue(G.has_edge(v, w))

    def test_lines_without_partners_add_nothing(self):
        G = MapGraph.from_lines(["lonely", "", "A B"], " ")
        self.assertFalse(G.has_vertex("lonely"))
        self.assertEqual(G.vertex_count(), 2)
        self.assertEqual(G.edge_count(), 1)

    def test_from_lines_comma_delimiter(self):
        G = MapGraph.from_lines(["x,y,z"], ",")
        self.assertEqual(sorted(G.adjacent_to("x")), ["y", "z"])
        self.assertFalse(G.has_edge("y", "z"))

    def test_empty_hub_adds_no_edges(self):
        G = MapGraph.from_lines([",A,B", "C,D"], ",")
        self.assertFalse(G.has_vertex("A"))
        self.assertFalse(G.has_vertex("B"))
        self.assertFalse(G.has_vertex(""))
        self.assertEqual(G.edge_count(), 1)

    def test_from_lines_empty_delimiter(self):
        with self.assertRaises(ValueError):
            MapGraph.from_lines(["A B"], "")

    def test_self_loop_line_reports_line_number(self):
        with self.assertRaises(GraphFormatError) as ctx:
            MapGraph.from_lines(["A B", "C C"], " ")
        self.assertEqual(ctx.exception.lineno, 2)
        self.assertEqual(ctx.exception.line, "C C")
        self.assertIsInstance(ctx.exception, ValueError)

    def test_from_file(self):
        path = self.write("tinyGraph.txt", TINY_GRAPH)
        G = MapGraph.from_file(path, " ")
        self.assertEqual(G.vertex_count(), 5)
        self.assertEqual(G.edge_count(), 7)
        self.assertEqual(sorted(G.adjacent_to("A")), ["B", "C", "G", "H"])
        self.assertEqual(sorted(G.adjacent_to("H")), ["A", "B"])

    def test_from_file_crlf(self):
        path = os.path.join(self.tmpdir, "crlf.txt")
        with open(path, "wb") as f:
            f.write(b"A,B\r\nB,C\r\n")
        G = MapGraph.from_file(path, ",")
        self.assertEqual(sorted(G.vertices()), ["A", "B", "C"])

    def test_empty_file_gives_empty_graph(self):
        path = self.write("empty.txt", "")
        G = MapGraph.from_file(path)
        self.assertEqual(G.vertex_count(), 0)

    def test_missing_file_raises_load_error(self):
        path = os.path.join(self.tmpdir, "missing.txt")
        with self.assertRaises(GraphLoadError) as ctx:
            MapGraph.from_file(path)
        self.assertEqual(ctx.exception.filename, path)
        self.assertTrue(str(ctx.exception).startswith(f"Cannot read graph source {path!r}"))
        self.assertNotIn("[Errno None]", str(ctx.exception))
        self.assertIsInstance(ctx.exception, OSError)
        self.assertIsInstance(ctx.exception, GraphError)
        self.assertIsInstance(ctx.exception.__cause__, FileNotFoundError)

    def test_undecodable_file_raises_load_error(self):
        path = os.path.join(self.tmpdir, "latin1.txt")
        with open(path, "wb") as f:
            f.write(b"A \xff\n")
        with self.assertRaises(GraphLoadError):
            MapGraph.from_file(path, encoding="utf-8")

    def test_read_lines(self):
        path = self.write("lines.txt", "a b\nc d\n")
        self.assertEqual(list(read_lines(path)), ["a b\n", "c d\n"])


if __name__ == "__main__":
    unittest.main()
