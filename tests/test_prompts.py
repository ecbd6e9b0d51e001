"""
Unit tests for the interactive prompts.
"""

import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

import click
from click.testing import CliRunner

from ghclone.core.config import PromptTheme
from ghclone.core.exceptions import PromptAbortedError
from ghclone.forge.models import RepositoryDescriptor, RepositoryIndex
from ghclone.prompts import Prompter, parse_selection


def run_prompt(ask, input_text, color=False):
    """Run a prompt under CliRunner and return (result, value)."""
    captured = {}

    @click.command()
    def command():
        captured["value"] = ask(Prompter(PromptTheme()))

    result = CliRunner().invoke(command, input=input_text, color=color)
    return result, captured.get("value")


class TestParseSelection(unittest.TestCase):
    """Tests for checklist answer parsing."""

    def test_blank_selects_nothing(self):
        self.assertEqual(parse_selection("", 3), [])
        self.assertEqual(parse_selection("   ", 3), [])

    def test_numbers_are_one_based(self):
        self.assertEqual(parse_selection("2", 3), [1])
        self.assertEqual(parse_selection("3, 1", 3), [0, 2])

    def test_ranges_and_duplicates(self):
        self.assertEqual(parse_selection("1-3 2", 5), [0, 1, 2])
        self.assertEqual(parse_selection("4-2", 5), [1, 2, 3])

    def test_all(self):
        self.assertEqual(parse_selection("all", 3), [0, 1, 2])
        self.assertEqual(parse_selection("ALL", 2), [0, 1])

    def test_out_of_range(self):
        with self.assertRaises(click.BadParameter):
            parse_selection("4", 3)
        with self.assertRaises(click.BadParameter):
            parse_selection("0", 3)

    def test_garbage(self):
        with self.assertRaises(click.BadParameter):
            parse_selection("one", 3)
        with self.assertRaises(click.BadParameter):
            parse_selection("-1", 3)

    def test_non_ascii_digits(self):
        with self.assertRaises(click.BadParameter):
            parse_selection("²", 3)
        with self.assertRaises(click.BadParameter):
            parse_selection("1-²", 3)
        with self.assertRaises(click.BadParameter):
            parse_selection("٣", 5)


class TestPrompter(unittest.TestCase):
    """Tests for the three workflow prompts."""

    def setUp(self):
        self.index = RepositoryIndex([
            RepositoryDescriptor("hello-world", "https://x/hello-world.git"),
            RepositoryDescriptor("Spoon-Knife", "https://x/Spoon-Knife.git"),
        ])

    def test_account_name_reprompts_until_valid(self):
        """Test that invalid usernames are rejected with a message."""
        result, value = run_prompt(
            lambda p: p.account_name(), "bad name\nocto/cat\noctocat\n"
        )

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(value, "octocat")
        self.assertEqual(result.output.count("Invalid username."), 2)

    def test_account_name_abort(self):
        """Test that Ctrl-C or end of input raises PromptAbortedError."""
        with patch("ghclone.prompts.click.prompt", side_effect=click.Abort):
            with self.assertRaises(PromptAbortedError) as ctx:
                Prompter(PromptTheme()).account_name()

        self.assertEqual(ctx.exception.stage, "Prompt")

    def test_repositories_lists_names_in_order(self):
        """Test that the checklist shows the index and returns indices."""
        result, value = run_prompt(lambda p: p.repositories(self.index), "2\n")

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(value, [1])
        self.assertLess(
            result.output.index("[1] hello-world"),
            result.output.index("[2] Spoon-Knife"),
        )
        self.assertIn("Selected: Spoon-Knife", result.output)

    def test_repositories_blank_is_empty(self):
        """Test that a blank answer selects nothing."""
        result, value = run_prompt(lambda p: p.repositories(self.index), "\n")

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(value, [])

    def test_repositories_reprompts_on_out_of_range(self):
        """Test that out-of-range answers are asked again."""
        result, value = run_prompt(lambda p: p.repositories(self.index), "5\n1\n")

        self.assertEqual(value, [0])
        self.assertIn("out of range", result.output)

    def test_account_name_rejects_surrounding_whitespace(self):
        """Test that spaces around a username are not silently trimmed."""
        result, value = run_prompt(
            lambda p: p.account_name(), " octocat \noctocat\n"
        )

        self.assertEqual(value, "octocat")
        self.assertEqual(result.output.count("Invalid username."), 1)

    def test_repositories_reprompts_on_superscript_digit(self):
        """Test that a non-ASCII digit is asked again instead of crashing."""
        result, value = run_prompt(
            lambda p: p.repositories(self.index), "²\n1\n"
        )

        self.assertIsNone(result.exception)
        self.assertEqual(value, [0])
        self.assertIn("Invalid selection", result.output)

    def test_destination_default_uses_value_style(self):
        """Test that the default and the chosen directory use the theme."""
        result, value = run_prompt(
            lambda p: p.destination_dir("."), "\n", color=True
        )

        self.assertEqual(value, ".")
        self.assertIn(click.style(".", fg="yellow", dim=True), result.output)
        self.assertIn("Cloning into:", result.output)

    def test_destination_default(self):
        """Test that an empty answer takes the default directory."""
        result, value = run_prompt(lambda p: p.destination_dir("."), "\n")

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(value, ".")

    def test_destination_reprompts_on_invalid_path(self):
        """Test that files and missing paths are rejected."""
        with tempfile.TemporaryDirectory() as tmpdir:
            file_path = Path(tmpdir) / "file.txt"
            file_path.write_text("x")
            missing = Path(tmpdir) / "missing"

            result, value = run_prompt(
                lambda p: p.destination_dir("."),
                f"{file_path}\n{missing}\n{tmpdir}\n",
            )

        self.assertEqual(value, tmpdir)
        self.assertEqual(result.output.count("Invalid path."), 2)


if __name__ == "__main__":
    unittest.main()
