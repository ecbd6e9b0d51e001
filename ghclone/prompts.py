"""
Interactive prompts.

Each prompt blocks until the user submits valid input; invalid input is
reported and asked for again. Ctrl-C or end of input raises
PromptAbortedError.
"""

import re
from typing import List, Optional

import click

from ghclone.core.config import PromptTheme
from ghclone.core.exceptions import PromptAbortedError
from ghclone.forge.models import RepositoryIndex
from ghclone.utils.validation import is_valid_account_name, is_valid_directory

SELECTION_SEPARATOR = re.compile(r"[\s,]+")
SELECTION_NUMBER = re.compile(r"^[0-9]+$")
SELECTION_RANGE = re.compile(r"^([0-9]+)-([0-9]+)$")


def parse_selection(value: str, count: int) -> List[int]:
    """
    Parse a checklist answer into 0-based indices.

    Accepts 1-based numbers, ranges such as `2-4` and `all`, separated by
    commas and/or whitespace. A blank answer selects nothing.

    Args:
        value: Raw answer.
        count: Number of items offered.

    Returns:
        Sorted list of unique 0-based indices.

    Raises:
        click.BadParameter: On unknown tokens or numbers out of range.
    """
    selected = set()

    for token in SELECTION_SEPARATOR.split(value.strip()):
        if not token:
            continue

        if token.lower() == "all":
            selected.update(range(count))
            continue

        range_match = SELECTION_RANGE.match(token)
        if range_match:
            start, end = int(range_match.group(1)), int(range_match.group(2))
        elif SELECTION_NUMBER.match(token):
            start = end = int(token)
        else:
            raise click.BadParameter(f"Invalid selection: '{token}'.")

        if start > end:
            start, end = end, start
        if start < 1 or end > count:
            raise click.BadParameter(
                f"Selection out of range: '{token}' (choose 1-{count})."
            )
        selected.update(range(start - 1, end))

    return sorted(selected)


class Prompter:
    """The three prompts of the workflow, styled with an explicit theme."""

    def __init__(self, theme: PromptTheme):
        self.theme = theme

    def _label(self, text: str) -> str:
        return click.style(text, fg=self.theme.prompt_color, bold=True)

    def _value(self, text: str) -> str:
        return click.style(
            text, fg=self.theme.value_color, dim=self.theme.value_dim
        )

    def _ask(self, label: str, default: Optional[str] = None, **kwargs):
        text = self._label(label)
        if default:
            text = f"{text} [{self._value(default)}]"
        try:
            return click.prompt(
                text, default=default, show_default=False, **kwargs
            )
        except click.Abort:
            raise PromptAbortedError(label) from None

    def account_name(self) -> str:
        """Ask for the forge account whose repositories are listed."""

        def check(value: str) -> str:
            if not is_valid_account_name(value):
                raise click.BadParameter("Invalid username.")
            return value

        return self._ask("GitHub username", value_proc=check)

    def repositories(self, index: RepositoryIndex) -> List[int]:
        """Show the repositories as a numbered checklist and read a selection."""
        width = len(str(len(index)))
        for number, name in enumerate(index.names, start=1):
            click.echo(f"  [{number:>{width}}] {name}")

        selection = self._ask(
            "Pick repos to clone (e.g. 1,3 5-7, 'all', blank for none)",
            default="",
            value_proc=lambda value: parse_selection(value, len(index)),
        )

        if selection:
            picked = ", ".join(index.names[i] for i in selection)
            click.echo(f"Selected: {self._value(picked)}")
        return selection

    def destination_dir(self, default: str = ".") -> str:
        """Ask for the directory the repositories are cloned into."""

        def check(value: str) -> str:
            value = value.strip()
            if not is_valid_directory(value):
                raise click.BadParameter("Invalid path.")
            return value

        destination = self._ask(
            "Directory to clone to", default=default, value_proc=check
        )
        click.echo(f"Cloning into: {self._value(destination)}")
        return destination

    def error(self, message: str) -> None:
        """Report a failure on stderr."""
        click.echo(
            click.style(f"Error: {message}", fg=self.theme.error_color),
            err=True,
        )
