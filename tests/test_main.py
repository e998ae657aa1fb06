# tests/test_main.py
import contextlib
import io
import os
import shutil
import tempfile
import unittest

from mapgraph.__main__ import run


class TestCommandLine(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.path = os.path.join(self.tmpdir, "graph.txt")
        with open(self.path, "w", encoding="utf-8") as f:
            f.write("A,B,C\nB,C\n")

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def run_cli(self, *argv):
        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            status = run(list(argv))
        return status, out.getvalue(), err.getvalue()

    def test_prints_adjacency(self):
        status, out, _ = self.run_cli(self.path, "--delimiter", ",")
        self.assertEqual(status, 0)
        lines = [line for line in out.splitlines() if line]
        self.assertEqual(len(lines), 3)
        self.assertIn("A: ", out)

    def test_copy_prints_twice(self):
        status, out, _ = self.run_cli(self.path, "-d", ",", "--copy")
        self.assertEqual(status, 0)
        lines = [line for line in out.splitlines() if line]
        self.assertEqual(len(lines), 6)

    def test_missing_file(self):
        status, out, err = self.run_cli(os.path.join(self.tmpdir, "nope.txt"))
        self.assertEqual(status, 1)
        self.assertEqual(out, "")
        self.assertIn("Cannot read graph source", err)

    def test_empty_delimiter(self):
        with self.assertRaises(SystemExit) as ctx:
            self.run_cli(self.path, "-d", "")
        self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
