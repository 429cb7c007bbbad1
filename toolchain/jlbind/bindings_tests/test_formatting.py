"""
Unit tests for bindings/formatting.py module.

Tests accessor suffixes, C++ type stripping and indentation.
"""

import unittest
from ..bindings.formatting import suffix, strip_type, indent
from ..bindings.schema import ElementKind, Shape


class TestSuffix(unittest.TestCase):
    """Tests for suffix()."""

    def test_general_matrix_has_no_suffix(self):
        self.assertEqual(suffix(ElementKind.OTHER, Shape.GENERAL), "")

    def test_shapes(self):
        """Rows get 'Row', columns get 'Col'."""
        self.assertEqual(suffix(ElementKind.OTHER, Shape.ROW_VECTOR), "Row")
        self.assertEqual(suffix(ElementKind.OTHER, Shape.COLUMN_VECTOR), "Col")

    def test_unsigned_marker_precedes_shape(self):
        self.assertEqual(suffix(ElementKind.UNSIGNED_INTEGRAL, Shape.GENERAL), "U")
        self.assertEqual(suffix(ElementKind.UNSIGNED_INTEGRAL, Shape.ROW_VECTOR), "URow")
        self.assertEqual(suffix(ElementKind.UNSIGNED_INTEGRAL, Shape.COLUMN_VECTOR), "UCol")

    def test_custom_marker(self):
        self.assertEqual(suffix(ElementKind.UNSIGNED_INTEGRAL, Shape.COLUMN_VECTOR, "Size"), "SizeCol")

    def test_stable(self):
        """The suffix is a pure function of its inputs."""
        for kind in ElementKind:
            for shape in Shape:
                self.assertEqual(suffix(kind, shape), suffix(kind, shape))


class TestStripType(unittest.TestCase):
    """Tests for strip_type()."""

    def test_empty_template_arguments(self):
        self.assertEqual(strip_type("LinearRegression<>"), "LinearRegression")

    def test_plain_identifier_unchanged(self):
        self.assertEqual(strip_type("GaussianKernel"), "GaussianKernel")

    def test_namespaces_removed(self):
        self.assertEqual(strip_type("mlpack::regression::LinearRegression<>"), "LinearRegression")

    def test_template_arguments_kept(self):
        """Non-empty template arguments survive as identifier-safe text."""
        self.assertEqual(strip_type("HMMModel<GMM>"), "HMMModel_GMM_")
        self.assertEqual(strip_type("HMM<GMM<arma::mat>, int>"), "HMM_GMM_mat__int_")

    def test_distinct_instantiations_stay_distinct(self):
        self.assertNotEqual(strip_type("mlpack::HMMModel<GMM>"),
                            strip_type("mlpack::HMMModel<DiagonalGMM>"))
        self.assertEqual(strip_type("HMMModel<GMM, int>"), strip_type("HMMModel<GMM,int>"))

    def test_qualifiers_and_references_removed(self):
        self.assertEqual(strip_type("const mlpack::LARS&"), "LARS")
        self.assertEqual(strip_type("LogisticRegression<>*"), "LogisticRegression")
        self.assertEqual(strip_type("struct DTree"), "DTree")

    def test_invalid_characters_replaced(self):
        self.assertEqual(strip_type("KDE Model"), "KDE_Model")

    def test_result_is_identifier(self):
        for cpp_type in ["const ns::Foo<int>*", "Bar<>&", "volatile Baz", "A B-C"]:
            stripped = strip_type(cpp_type)
            self.assertTrue(stripped.replace("_", "a").isalnum(), stripped)
            for ch in "<>:*& ,":
                self.assertNotIn(ch, stripped)

    def test_nothing_left(self):
        self.assertEqual(strip_type("<>"), "")
        self.assertEqual(strip_type("const <>"), "")
        self.assertEqual(strip_type(""), "")


class TestIndent(unittest.TestCase):
    """Tests for indent()."""

    def test_indent(self):
        self.assertEqual(indent(0), "")
        self.assertEqual(indent(4), "    ")

    def test_negative_raises(self):
        with self.assertRaises(ValueError):
            indent(-1)


if __name__ == "__main__":
    unittest.main()
