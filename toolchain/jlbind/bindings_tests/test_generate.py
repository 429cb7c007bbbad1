"""
Smoke tests for the command-line layer (args.py, generate.py).
"""
# pylint: disable=import-outside-toplevel

import os
import tempfile
import unittest
from .. import args, state, generate
from ..common import JLBindException
from ..config import DEFAULT_CONFIG


MANIFEST = """\
programs:
  knn:
    - {name: reference, type: "arma::mat", required: true}
    - {name: k, type: int}
  nbc:
    - {name: test, type: "arma::mat"}
"""


class TestArgs(unittest.TestCase):
    """Tests for args.parse."""

    def test_generate_arguments(self):
        parsed = args.parse(["generate", "m.yaml", "-o", "out.jl", "-p", "knn", "-j", "2"])
        self.assertEqual(parsed["command"], "generate")
        self.assertEqual(parsed["manifest"], "m.yaml")
        self.assertEqual(parsed["output"], "out.jl")
        self.assertEqual(parsed["programs"], ["knn"])
        self.assertEqual(parsed["jobs"], 2)
        self.assertIsNone(parsed["config"])

    def test_types_arguments(self):
        self.assertEqual(args.parse(["types"])["command"], "types")


class TestGenerateCommand(unittest.TestCase):
    """Tests for generate.generate."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.manifest = os.path.join(self.tmpdir.name, "manifest.yaml")
        self.output = os.path.join(self.tmpdir.name, "out.jl")
        with open(self.manifest, "w") as f:
            f.write(MANIFEST)

        self.saved = (state.gARG, state.gCFG)
        state.gCFG = DEFAULT_CONFIG

    def tearDown(self):
        state.gARG, state.gCFG = self.saved
        self.tmpdir.cleanup()

    def _run(self, *extra):
        state.gARG = args.parse(["generate", self.manifest, "-o", self.output, *extra])
        generate.generate()
        with open(self.output, "r") as f:
            return f.read()

    def test_writes_all_programs(self):
        self.assertEqual(self._run(), (
            '# knn\n'
            '  Store("reference", convert(Array{Float64, 2}, reference))\n'
            '  if k !== nothing\n'
            '    Store("k", convert(Int, k))\n'
            '  end\n'
            '\n'
            '# nbc\n'
            '  if test !== nothing\n'
            '    Store("test", convert(Array{Float64, 2}, test))\n'
            '  end\n'
        ))

    def test_program_selection(self):
        text = self._run("-p", "nbc", "-j", "2")
        self.assertTrue(text.startswith("# nbc\n"))
        self.assertNotIn("# knn", text)

    def test_unknown_program_raises(self):
        with self.assertRaises(JLBindException):
            self._run("-p", "kmeans")


class TestRender(unittest.TestCase):
    """Tests for generate.render."""

    def test_render_empty(self):
        self.assertEqual(generate.render({}), "")


if __name__ == "__main__":
    unittest.main()
