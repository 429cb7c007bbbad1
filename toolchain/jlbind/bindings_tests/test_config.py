"""
Unit tests for config.py module.

Tests GeneratorConfig construction and YAML loading.
"""

import os
import tempfile
import unittest
from ..common import JLBindException
from ..config import GeneratorConfig, DEFAULT_CONFIG, load_config
from ..bindings.input_processing import emit_param
from ..bindings.schema import ParamData
from ..bindings.types import TYPES
from ..bindings.writer import CodeWriter


class TestGeneratorConfig(unittest.TestCase):
    """Tests for GeneratorConfig."""

    def test_defaults(self):
        self.assertEqual(DEFAULT_CONFIG.store_prefix, "Store")
        self.assertEqual(DEFAULT_CONFIG.unsigned_marker, "U")
        self.assertEqual(DEFAULT_CONFIG.object_suffix, "Ptr")
        self.assertEqual(DEFAULT_CONFIG.base_indent, 2)
        self.assertEqual(DEFAULT_CONFIG.indent_step, 2)
        self.assertEqual(DEFAULT_CONFIG.absent, "nothing")
        self.assertEqual(DEFAULT_CONFIG.unsigned_elem_types, ("size_t",))

    def test_from_partial_dict(self):
        config = GeneratorConfig.from_dict({"store_prefix": "CLISetParam"})
        self.assertEqual(config.store_prefix, "CLISetParam")
        self.assertEqual(config.base_indent, 2)

    def test_from_none(self):
        self.assertEqual(GeneratorConfig.from_dict(None), DEFAULT_CONFIG)

    def test_unsigned_types_become_tuple(self):
        config = GeneratorConfig.from_dict({"unsigned_elem_types": ["size_t", "uword"]})
        self.assertEqual(config.unsigned_elem_types, ("size_t", "uword"))

    def test_single_unsigned_type_is_wrapped(self):
        """A scalar YAML value names one type rather than its characters."""
        config = GeneratorConfig.from_dict({"unsigned_elem_types": "size_t"})
        self.assertEqual(config.unsigned_elem_types, ("size_t",))

        param  = ParamData(name="l", static_type=TYPES.resolve("arma::Row<size_t>"), required=True)
        writer = CodeWriter(base=config.base_indent, step=config.indent_step)
        emit_param(param, writer, config)
        self.assertEqual(writer.lines, ['  StoreURow("l", convert(Array{UInt, 1}, l))'])

    def test_invalid_unsigned_types_raise(self):
        for value in (3, {"size_t": True}, ["size_t", 4]):
            with self.assertRaises(JLBindException):
                GeneratorConfig.from_dict({"unsigned_elem_types": value})

    def test_string_options_must_be_strings(self):
        for key in ("store_prefix", "unsigned_marker", "object_suffix", "absent"):
            with self.assertRaises(JLBindException) as ctx:
                GeneratorConfig.from_dict({key: 1})
            self.assertIn(key, str(ctx.exception))

    def test_bool_indent_raises(self):
        with self.assertRaises(JLBindException):
            GeneratorConfig.from_dict({"indent_step": True})

    def test_unknown_key_raises(self):
        with self.assertRaises(JLBindException) as ctx:
            GeneratorConfig.from_dict({"store_prefx": "X"})
        self.assertIn("store_prefx", str(ctx.exception))

    def test_negative_indent_raises(self):
        with self.assertRaises(JLBindException):
            GeneratorConfig.from_dict({"base_indent": -2})

    def test_str(self):
        self.assertIn("store_prefix=Store", str(DEFAULT_CONFIG))


class TestLoadConfig(unittest.TestCase):
    """Tests for load_config."""

    def _write(self, content: str) -> str:
        fd, path = tempfile.mkstemp(suffix=".yaml")
        with os.fdopen(fd, "w") as f:
            f.write(content)
        self.addCleanup(os.remove, path)
        return path

    def test_no_file_gives_defaults(self):
        self.assertIs(load_config(None), DEFAULT_CONFIG)

    def test_load_yaml(self):
        path = self._write("store_prefix: SetParam\nbase_indent: 4\n")
        config = load_config(path)
        self.assertEqual(config.store_prefix, "SetParam")
        self.assertEqual(config.base_indent, 4)

    def test_empty_file_gives_defaults(self):
        self.assertEqual(load_config(self._write("")), DEFAULT_CONFIG)

    def test_non_mapping_raises(self):
        with self.assertRaises(JLBindException):
            load_config(self._write("- a\n- b\n"))

    def test_missing_file_raises(self):
        with self.assertRaises(JLBindException):
            load_config("/nonexistent/jlbind.yaml")


if __name__ == "__main__":
    unittest.main()
