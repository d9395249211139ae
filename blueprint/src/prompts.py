"""
Interactive collection of project information.

Asks for the project name, license and a free-form brain dump, and derives a
short description from the brain dump.
"""

import os
import re
from typing import Optional

import click

from .constants import (
    BRAIN_DUMP_SECTION,
    DEFAULT_DESCRIPTION,
    DEFAULT_LICENSE,
    LICENSE_CHOICES,
    MAX_DESCRIPTION_LENGTH,
)
from .errors import UserInputError
from .models import ProjectInfo

FIRST_SENTENCE = re.compile(r'^.+?[.!?](?:\s|$)')

BRAIN_DUMP_MARKER = '# Everything above this line is your brain dump. Save and close the editor when done.'


def derive_description(brain_dump: str) -> str:
    """
    Derive a short project description from brain dump text.

    Uses the first line if it is short enough, otherwise the first sentence,
    otherwise a placeholder.
    """
    text = brain_dump.strip()
    if not text:
        return DEFAULT_DESCRIPTION

    first_line = text.split('\n')[0].strip()
    if first_line and len(first_line) <= MAX_DESCRIPTION_LENGTH:
        return first_line

    match = FIRST_SENTENCE.match(text)
    if match:
        first_sentence = match.group(0).strip()
        if first_sentence and len(first_sentence) <= MAX_DESCRIPTION_LENGTH:
            return first_sentence

    return DEFAULT_DESCRIPTION


class ProjectInfoCollector:
    """Gathers project info from the user through click prompts."""

    def __init__(self, default_name: Optional[str] = None):
        self.default_name = default_name or os.path.basename(os.getcwd()) or 'my-project'

    def prompt_for_basic_info(self) -> ProjectInfo:
        """
        Prompt for name, license and brain dump.

        Returns:
            ProjectInfo with a single brain dump section

        Raises:
            UserInputError: If the editor cannot be opened or input ends early
        """
        click.echo('🚀 Welcome to Blueprint')
        click.echo('Please provide some basic information about your project.\n')

        try:
            name = click.prompt('Project name', default=self.default_name)
            license_id = click.prompt(
                'License',
                type=click.Choice(LICENSE_CHOICES),
                default=DEFAULT_LICENSE,
                show_choices=True
            )

            click.echo('\n📝 Please provide a brain dump of your project vision, goals, and details.')
            click.echo("Think of this as a stream of consciousness about what you're building.")
            click.echo('The more details you provide, the better your documentation will be.\n')
            click.prompt('Press Enter to open your text editor', default='', show_default=False)

            brain_dump = self._read_brain_dump()
        except click.exceptions.Abort as e:
            raise UserInputError('Input ended before project info was collected', cause=e)
        except click.ClickException as e:
            raise UserInputError('Could not collect the brain dump', cause=e)

        return ProjectInfo(
            name=name,
            description=derive_description(brain_dump),
            author='',
            license=license_id or DEFAULT_LICENSE,
            sections={BRAIN_DUMP_SECTION: {'content': brain_dump}},
        )

    def _read_brain_dump(self) -> str:
        edited = click.edit(f"\n\n{BRAIN_DUMP_MARKER}\n", extension='.md')
        if edited is None:
            # Editor closed without saving
            return ''
        return edited.split(BRAIN_DUMP_MARKER)[0].strip()

    def confirm_generation(self) -> bool:
        """Ask whether to go ahead with generation."""
        return click.confirm('Generate all documentation files?', default=True)
