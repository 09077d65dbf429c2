"""Tests for shell command-line parsing."""

from __future__ import annotations

import unittest

from treeshell.errors import CommandSyntaxError
from treeshell.history import OperationKind
from treeshell.shell.commands import parse_command_line, parse_grep_args, parse_write_args


class ParseCommandLineTests(unittest.TestCase):
    def test_blank_lines_and_comments_are_skipped(self) -> None:
        self.assertIsNone(parse_command_line(""))
        self.assertIsNone(parse_command_line("   \n"))
        self.assertIsNone(parse_command_line("# note"))

    def test_verb_is_lowercased_and_args_are_shell_split(self) -> None:
        command = parse_command_line('  MKDIR "my docs"\n')
        assert command is not None

        self.assertEqual(command.verb, "mkdir")
        self.assertEqual(command.args, ("my docs",))
        self.assertEqual(command.text, 'MKDIR "my docs"')

    def test_write_keeps_raw_rest(self) -> None:
        command = parse_command_line("write a.txt it's fine")
        assert command is not None

        self.assertEqual(command.args, ())
        self.assertEqual(command.rest, "a.txt it's fine")

    def test_unbalanced_quotes_raise(self) -> None:
        with self.assertRaises(CommandSyntaxError):
            parse_command_line('touch "a.txt')


class ParseWriteArgsTests(unittest.TestCase):
    def test_name_and_free_text(self) -> None:
        self.assertEqual(parse_write_args("a.txt hello world"), ("a.txt", "hello world"))

    def test_newline_escape_becomes_newline(self) -> None:
        self.assertEqual(parse_write_args(r"a.txt one\ntwo"), ("a.txt", "one\ntwo"))

    def test_quoted_name_and_apostrophes_in_text(self) -> None:
        self.assertEqual(parse_write_args('"my notes.txt" don\'t panic'), ("my notes.txt", "don't panic"))

    def test_name_without_text_writes_empty_content(self) -> None:
        self.assertEqual(parse_write_args("a.txt"), ("a.txt", ""))

    def test_missing_name_raises(self) -> None:
        with self.assertRaisesRegex(CommandSyntaxError, "missing file name"):
            parse_write_args("   ")


class ParseGrepArgsTests(unittest.TestCase):
    def test_plain_pattern(self) -> None:
        request = parse_grep_args(["hello"])

        self.assertEqual(request.pattern, "hello")
        self.assertTrue(request.options.show_line_numbers)
        self.assertTrue(request.options.show_file_path)
        self.assertIs(request.operation, OperationKind.GREP)
        self.assertEqual(request.history_target, "hello")

    def test_combined_flags(self) -> None:
        request = parse_grep_args(["-ich", "x"])

        self.assertTrue(request.options.case_insensitive)
        self.assertTrue(request.options.count_only)
        self.assertFalse(request.options.show_file_path)
        self.assertIs(request.operation, OperationKind.GREP_OPTIONS)

    def test_recursive_only_is_its_own_operation(self) -> None:
        self.assertIs(parse_grep_args(["-r", "x"]).operation, OperationKind.GREP_RECURSIVE)
        self.assertIs(parse_grep_args(["-ri", "x"]).operation, OperationKind.GREP_OPTIONS)

    def test_file_argument(self) -> None:
        request = parse_grep_args(["-v", "x", "a.txt"])

        self.assertEqual(request.options.target_file, "a.txt")
        self.assertTrue(request.options.invert_match)
        self.assertIs(request.operation, OperationKind.GREP_FILE)
        self.assertEqual(request.history_target, "a.txt")

    def test_help(self) -> None:
        request = parse_grep_args(["--help"])

        self.assertTrue(request.show_help)
        self.assertIs(request.operation, OperationKind.GREP_HELP)
        self.assertEqual(request.history_target, "")

    def test_double_dash_allows_dash_patterns(self) -> None:
        self.assertEqual(parse_grep_args(["--", "-x"]).pattern, "-x")

    def test_flags_after_pattern_are_positionals(self) -> None:
        request = parse_grep_args(["x", "-i"])

        self.assertEqual(request.options.target_file, "-i")
        self.assertFalse(request.options.case_insensitive)

    def test_errors(self) -> None:
        with self.assertRaisesRegex(CommandSyntaxError, "unknown option -z"):
            parse_grep_args(["-z", "x"])
        with self.assertRaisesRegex(CommandSyntaxError, "missing pattern"):
            parse_grep_args(["-i"])
        with self.assertRaisesRegex(CommandSyntaxError, "at most one file"):
            parse_grep_args(["x", "a", "b"])


if __name__ == "__main__":
    unittest.main()
