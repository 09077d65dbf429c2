"""Behavior tests for the shell dispatcher.

Shells are built with ``no_color=True`` so assertions see plain text; theme
persistence is redirected to a temporary config file.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from treeshell.history import HistoryLog, OperationKind
from treeshell.shell import Shell
from treeshell.storage import StorageEngine


def _shell() -> Shell:
    return Shell(engine=StorageEngine(), history=HistoryLog(), no_color=True)


def _run(shell: Shell, *lines: str) -> list[str]:
    output: list[str] = []
    for line in lines:
        output.extend(shell.execute(line).lines)
    return output


class ShellFolderCommandTests(unittest.TestCase):
    def test_mkdir_cd_pwd_and_prompt(self) -> None:
        shell = _shell()

        self.assertEqual(_run(shell, "mkdir docs"), ["New folder created! Name = docs id = F2"])
        self.assertEqual(_run(shell, "cd docs"), [])
        self.assertEqual(_run(shell, "pwd"), ["/docs"])
        self.assertEqual(shell.prompt(), "/docs> ")
        _run(shell, "cd ..")
        self.assertEqual(shell.prompt(), "/> ")

    def test_duplicate_mkdir_and_bad_cd_messages(self) -> None:
        shell = _shell()
        _run(shell, "mkdir docs")

        self.assertEqual(_run(shell, "mkdir docs"), ["Folder name already exists! Change the name of the folder."])
        self.assertEqual(_run(shell, "cd nosuchfolder"), ["Wrong folder name, no folder exists with name nosuchfolder"])
        self.assertEqual(shell.engine.current_path(), "")

    def test_rmdir_reports_each_removed_entity(self) -> None:
        shell = _shell()
        _run(shell, "mkdir docs", "cd docs", "touch a.txt", "cd ..")

        self.assertEqual(
            _run(shell, "rmdir docs"),
            [
                "File id - f0 and name - a.txt removed successfully!",
                "Folder id - F2 and name - docs removed successfully!",
                "Folder removed successfully!",
            ],
        )
        self.assertEqual(_run(shell, "ls"), [])

    def test_tree_output(self) -> None:
        shell = _shell()
        _run(shell, "mkdir docs", "touch readme.md", "cd docs", "touch a.txt", "cd ..")

        self.assertEqual(_run(shell, "tree"), ["- BaseFolder", "  |- docs", "  |  |- a.txt", "  |- readme.md"])

    def test_invalid_name_and_usage_errors(self) -> None:
        shell = _shell()

        self.assertEqual(_run(shell, "mkdir .."), ["Invalid name: '..'"])
        self.assertEqual(_run(shell, "mkdir"), ["usage: mkdir <folder name>"])
        self.assertEqual(_run(shell, "ls extra"), ["usage: ls"])


class ShellFileCommandTests(unittest.TestCase):
    def test_touch_write_cat_rm_cycle(self) -> None:
        shell = _shell()

        self.assertEqual(_run(shell, "touch a.txt"), ["File created! File name = a.txt, id = f0, in folder id - F1"])
        self.assertEqual(_run(shell, r"write a.txt hello\nworld"), ["Content written to a.txt."])
        self.assertEqual(_run(shell, "cat a.txt"), ["hello", "world"])
        self.assertEqual(_run(shell, "rm a.txt"), ["File removed successfully!"])
        self.assertEqual(_run(shell, "cat a.txt"), ["No file named a.txt in the current folder."])

    def test_touch_twice_keeps_one_entry(self) -> None:
        shell = _shell()
        _run(shell, "touch a.txt")

        self.assertEqual(_run(shell, "touch a.txt"), ["File name already exists! Change the name of the file."])
        self.assertEqual(_run(shell, "ls"), ["a.txt"])

    def test_write_to_missing_file(self) -> None:
        self.assertEqual(_run(_shell(), "write ghost.txt hi"), ["No file named ghost.txt in the current folder."])

    def test_folder_and_file_with_same_name_coexist(self) -> None:
        shell = _shell()
        _run(shell, "mkdir sub", "touch sub")

        self.assertEqual(_run(shell, "ls"), ["sub", "sub"])


class ShellGrepCommandTests(unittest.TestCase):
    def test_grep_in_subfolder_groups_by_file(self) -> None:
        shell = _shell()
        _run(shell, "mkdir docs", "cd docs", "touch a.txt", "write a.txt hello\\nbye\\nhello again")

        self.assertEqual(
            _run(shell, "grep hello"),
            [
                'Searching for pattern: "hello" in current directory...',
                "=== docs/a.txt ===",
                "1: hello",
                "3: hello again",
            ],
        )

    def test_grep_count_and_no_matches(self) -> None:
        shell = _shell()
        _run(shell, "touch a.txt", "write a.txt x\\nx\\ny")

        self.assertEqual(_run(shell, "grep -c x")[-1], "Total matches: 2")
        self.assertEqual(_run(shell, "grep zzz")[-1], "No matches found.")

    def test_grep_missing_file(self) -> None:
        self.assertEqual(_run(_shell(), "grep x ghost.txt"), ["File not found: ghost.txt"])

    def test_grep_help_and_bad_option(self) -> None:
        shell = _shell()

        self.assertEqual(_run(shell, "grep --help")[0], "GREP - Search for patterns in files")
        self.assertEqual(_run(shell, "grep -q x"), ["grep: unknown option -q"])


class ShellHistoryTests(unittest.TestCase):
    def test_history_records_operation_kinds_and_path(self) -> None:
        shell = _shell()
        _run(shell, "mkdir docs", "cd docs", "touch a.txt", "grep -r x", "ls", "help", "bogus")

        entries = shell.history.entries()

        self.assertEqual(
            [(entry.operation, entry.target, entry.path) for entry in entries],
            [
                (OperationKind.CREATE_FOLDER, "docs", ""),
                (OperationKind.CHANGE_DIR, "docs", "docs"),
                (OperationKind.CREATE_FILE, "a.txt", "docs"),
                (OperationKind.GREP_RECURSIVE, "x", "docs"),
                (OperationKind.LIST_ITEMS, "", "docs"),
            ],
        )

    def test_history_output_and_clear(self) -> None:
        shell = _shell()

        self.assertEqual(_run(shell, "history"), ["No history available."])
        _run(shell, "pwd", "ls")
        recent = _run(shell, "history 1")
        self.assertEqual(recent[0], "Recent Command History (last 1 commands):")
        self.assertEqual(len(recent), 5)
        self.assertTrue(recent[-1].endswith("ls"))
        self.assertEqual(_run(shell, "history 0"), ["Invalid count. Please specify a positive number."])
        self.assertEqual(_run(shell, "history -c"), ["History cleared successfully."])
        self.assertEqual(len(shell.history), 0)

    def test_failed_syntax_is_not_recorded(self) -> None:
        shell = _shell()
        _run(shell, "mkdir", "grep")

        self.assertEqual(len(shell.history), 0)


class ShellMiscTests(unittest.TestCase):
    def test_unknown_command_and_exit(self) -> None:
        shell = _shell()

        self.assertEqual(_run(shell, "frobnicate"), ["Wrong command! Unknown command: frobnicate (try help)"])
        self.assertTrue(shell.execute("exit").exit)
        self.assertTrue(shell.execute("QUIT").exit)
        self.assertFalse(shell.execute("").exit)

    def test_help_lists_commands(self) -> None:
        lines = _run(_shell(), "help")

        self.assertEqual(lines[0], "Available commands:")
        self.assertTrue(any(line.strip().startswith("grep") for line in lines))

    def test_theme_switch_is_saved(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("treeshell.config.CONFIG_PATH", config_path):
                shell = _shell()
                self.assertEqual(_run(shell, "theme ocean"), ["Theme set to ocean."])
                self.assertIn('"theme": "ocean"', config_path.read_text(encoding="utf-8"))
                self.assertEqual(_run(shell, "theme neon")[0], "Unknown theme: neon (available: default, ocean)")
                self.assertEqual(_run(shell, "theme")[0], "Current theme: ocean")

    def test_separate_shells_do_not_share_state(self) -> None:
        first = _shell()
        second = _shell()
        _run(first, "touch a.txt")

        self.assertEqual(_run(second, "ls"), [])
        self.assertEqual(len(second.history), 0)


if __name__ == "__main__":
    unittest.main()
