import unittest
import sys
import os
import io
import contextlib

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_tracer import config
from maze_tracer.core.graph import new_maze
from maze_tracer.viz.text import render_text
from maze_tracer.main import main

class TestConfig(unittest.TestCase):
    def test_defaults(self):
        cfg = config.TraceConfig(side=4)
        self.assertEqual(cfg.start, 0)
        self.assertEqual(cfg.end, 15)
        self.assertIsNone(cfg.seed)

    def test_rejects_bad_values(self):
        with self.assertRaises(ValueError):
            config.TraceConfig(side=0)
        with self.assertRaises(ValueError):
            config.TraceConfig(side=3, start=9)
        with self.assertRaises(ValueError):
            config.TraceConfig(side=3, end=-1)
        with self.assertRaises(ValueError):
            config.TraceConfig(side=3, path_delay=-0.1)

class TestTextRender(unittest.TestCase):
    def test_two_by_two(self):
        graph = new_maze(2)
        graph.open_passage(0, 1)
        graph.open_passage(0, 2)
        graph.open_passage(2, 3)

        text = render_text(graph, explored={1}, path=[0, 2, 3])
        self.assertEqual(text.splitlines(), [
            "+--+--+",
            "|S  . |",
            "+  +--+",
            "|o  E |",
            "+--+--+",
        ])

    def test_closed_grid(self):
        text = render_text(new_maze(1))
        self.assertEqual(text, "+--+\n|  |\n+--+")

class TestCLI(unittest.TestCase):
    def run_cli(self, *argv):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            code = main(list(argv))
        return code, out.getvalue()

    def test_generate(self):
        code, out = self.run_cli("generate", "--side", "4", "--seed", "1")
        self.assertEqual(code, 0)
        lines = out.strip().splitlines()
        self.assertEqual(len(lines), 2 * 4 + 1)
        self.assertEqual(lines[0], "+--+--+--+--+")

    def test_solve(self):
        code, out = self.run_cli("solve", "--side", "5", "--seed", "3", "--events")
        self.assertEqual(code, 0)
        self.assertIn("explore 0", out)
        self.assertIn("path 24", out)
        self.assertIn("Path Length:", out)

    def test_solve_single_cell(self):
        code, out = self.run_cli("solve", "--side", "1", "--events", "--no-draw")
        self.assertEqual(code, 0)
        self.assertIn("explore 0\npath 0\n", out)

    def test_bad_config_exits(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main(["solve", "--side", "3", "--end", "99"])
        self.assertEqual(ctx.exception.code, 2)

if __name__ == '__main__':
    unittest.main()
