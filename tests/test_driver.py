"""
Tests for the evaluation driver and the command-line front end.

Author: xwest
"""

import io
import unittest
import sys
import os
from contextlib import redirect_stdout, redirect_stderr

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from exprparser import ErrorKind, EvaluationResult, Parser, ParserConfig, evaluate
from exprparser.cli import main
from exprparser.config import max_depth_ceiling
from exprparser.driver import format_value


class TestEvaluate(unittest.TestCase):
    """Test cases for the driver's result conversion."""

    def test_success(self):
        result = evaluate("5+6*6")

        self.assertTrue(result.success)
        self.assertTrue(result)
        self.assertEqual(result.value, 66)
        self.assertIsNone(result.error_kind)
        self.assertEqual(result.message, "5+6*6 = 66")

    def test_failure_kinds(self):
        cases = {
            "1 + 3 + test": ErrorKind.INVALID_TOKEN,
            "": ErrorKind.EMPTY_EXPRESSION,
            "5 + 6 + 4 +": ErrorKind.UNEXPECTED_TOKEN,
            "(1 + (12 * 2)": ErrorKind.PARENTHESES_MISMATCH,
            "5 + 6) *+ 4": ErrorKind.UNEXPECTED_PARENTHESES,
            "5( + 6 *+ 4": ErrorKind.UNEXPECTED_PARENTHESES,
            "5 + )6 *+ 4": ErrorKind.UNEXPECTED_TOKEN,
            "5 / 0": ErrorKind.DIVIDE_BY_ZERO,
        }
        for expression, kind in cases.items():
            with self.subTest(expression=expression):
                result = evaluate(expression)
                self.assertFalse(result.success)
                self.assertFalse(result)
                self.assertIsNone(result.value)
                self.assertEqual(result.error_kind, kind)
                self.assertTrue(result.message)

    def test_failure_message(self):
        result = evaluate("5 / 0")
        self.assertEqual(result.message, "RDParser:: Division by zero")

    def test_value_or(self):
        self.assertEqual(evaluate("2*3").value_or(-1), 6)
        self.assertEqual(evaluate("2*").value_or(-1), -1)

    def test_config_is_applied(self):
        result = evaluate("2147483648", ParserConfig(integer_bits=32))
        self.assertEqual(result.error_kind, ErrorKind.LITERAL_OVERFLOW)

        result = evaluate("((1))", ParserConfig(max_depth=1))
        self.assertEqual(result.error_kind, ErrorKind.NESTING_DEPTH_EXCEEDED)

    def test_reuses_supplied_parser(self):
        parser = Parser()
        self.assertEqual(evaluate("1 + 1", parser=parser).value, 2)
        self.assertEqual(evaluate("(1", parser=parser).error_kind, ErrorKind.PARENTHESES_MISMATCH)
        self.assertEqual(evaluate("3", parser=parser).value, 3)

    def test_result_beyond_digit_conversion_limit(self):
        """A product of two 3000-digit literals evaluates even where int-to-str is capped."""
        big = "9" * 3000
        expression = f"{big} * {big}"

        result = evaluate(expression)

        self.assertTrue(result.success)
        self.assertEqual(result.value, (10 ** 3000 - 1) ** 2)
        self.assertTrue(result.message.startswith(f"{expression} = "))

    @unittest.skipUnless(hasattr(sys, "set_int_max_str_digits"),
                         "interpreter has no int-to-str digit limit")
    def test_format_value_over_digit_limit(self):
        value = 10 ** 1000
        previous = sys.get_int_max_str_digits()
        sys.set_int_max_str_digits(640)
        try:
            self.assertEqual(format_value(value), f"<{value.bit_length()}-bit integer>")
            self.assertEqual(format_value(-12345), "-12345")
        finally:
            sys.set_int_max_str_digits(previous)

    def test_result_is_immutable(self):
        result = EvaluationResult("1", True, 1)
        with self.assertRaises(AttributeError):
            result.value = 2


class TestCommandLine(unittest.TestCase):
    """Test cases for the exprcalc entry point."""

    def _run(self, argv):
        stdout, stderr = io.StringIO(), io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            status = main(argv)
        return status, stdout.getvalue(), stderr.getvalue()

    def test_demo_expression(self):
        status, out, err = self._run([])
        self.assertEqual(status, 0)
        self.assertEqual(out, "5+6*6 = 66\n")
        self.assertEqual(err, "")

    def test_multiple_expressions(self):
        status, out, _ = self._run(["1 + 3 * 4", "4 + (12 / (1 * 2))"])
        self.assertEqual(status, 0)
        self.assertEqual(out.splitlines(), ["1 + 3 * 4 = 16", "4 + (12 / (1 * 2)) = 10"])

    def test_failure_exits_zero_by_default(self):
        status, out, err = self._run(["5 / 0"])
        self.assertEqual(status, 0)
        self.assertEqual(out, "")
        self.assertEqual(err, "Error: RDParser:: Division by zero\n")

    def test_strict_failure(self):
        status, out, err = self._run(["--strict", "1", "5 +"])
        self.assertEqual(status, 1)
        self.assertEqual(out, "1 = 1\n")
        self.assertIn("Unexpected token encountered: +", err)

    def test_strict_success(self):
        status, _, _ = self._run(["--strict", "2 * 2"])
        self.assertEqual(status, 0)

    def test_bits_option(self):
        status, _, err = self._run(["--bits", "8", "--strict", "128"])
        self.assertEqual(status, 1)
        self.assertIn("Integer literal out of range: 128", err)

    def test_invalid_config(self):
        status, _, err = self._run(["--max-depth", "0", "1"])
        self.assertEqual(status, 2)
        self.assertIn("max_depth", err)

    def test_tree_output(self):
        status, out, _ = self._run(["--tree", "--", "1 + 3 * 4", "-(2)"])
        self.assertEqual(status, 0)
        self.assertEqual(out.splitlines(), ["((1 + 3) * 4)", "-2"])

    def test_tree_output_for_long_chain(self):
        status, out, err = self._run(["--tree", "+".join(["1"] * 3000)])
        self.assertEqual(status, 0)
        self.assertEqual(err, "")
        self.assertTrue(out.startswith("(" * 2999 + "1 + 1)"))

    def test_huge_result(self):
        big = "9" * 3000
        status, out, err = self._run(["--strict", f"{big} * {big}"])
        self.assertEqual(status, 0)
        self.assertEqual(err, "")
        self.assertTrue(out.startswith(f"{big} * {big} = "))

    def test_max_depth_above_ceiling(self):
        status, out, err = self._run(["--max-depth", "100000", "(" * 3000 + "1" + ")" * 3000])
        self.assertEqual(status, 2)
        self.assertEqual(out, "")
        self.assertIn("max_depth must not exceed", err)

    def test_tree_error(self):
        status, _, err = self._run(["--tree", "--strict", "(1"])
        self.assertEqual(status, 1)
        self.assertIn("Mismatched parentheses", err)


class TestParserConfig(unittest.TestCase):
    """Test cases for configuration validation."""

    def test_defaults(self):
        config = ParserConfig()
        self.assertIsNone(config.integer_bits)
        self.assertEqual(config.max_depth, 100)
        self.assertEqual(config.filename, "<expression>")

    def test_rejects_bad_values(self):
        with self.assertRaises(ValueError):
            ParserConfig(integer_bits=1)
        with self.assertRaises(ValueError):
            ParserConfig(max_depth=0)

    def test_max_depth_ceiling(self):
        """Limits deeper than the interpreter can recurse are rejected up front."""
        ceiling = max_depth_ceiling()
        self.assertGreaterEqual(ceiling, ParserConfig().max_depth)
        self.assertEqual(ParserConfig(max_depth=ceiling).max_depth, ceiling)

        with self.assertRaises(ValueError):
            ParserConfig(max_depth=ceiling + 1)
        with self.assertRaises(ValueError):
            ParserConfig(max_depth=100000)


if __name__ == '__main__':
    unittest.main()
