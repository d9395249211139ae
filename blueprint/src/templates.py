"""
Template registry for generated documentation files.

Each output path maps to a FileTemplate holding its static default content and
the prompt builders used when a content generator is available. Markdown
bodies live in the package's templates/ directory and are filled with
str.format.
"""

import json
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Callable, Dict, List, Optional

from .constants import COMMANDS_PREFIX
from .models import ProjectInfo

TEMPLATE_DIR = Path(__file__).parent.parent / "templates"

PromptGenerator = Callable[[str], str]
ProjectPromptGenerator = Callable[[ProjectInfo, str], str]


@dataclass(frozen=True)
class FileTemplate:
    """Static content and prompt builders for one output file."""
    default_content: str
    prompt_generator: PromptGenerator
    description: str
    enhanced_prompt_generator: Optional[ProjectPromptGenerator] = None
    render_template: Optional[ProjectPromptGenerator] = None


@lru_cache(maxsize=None)
def load_template_text(relative_path: str) -> str:
    """Read a markdown template shipped with the package."""
    with open(TEMPLATE_DIR / relative_path, 'r', encoding='utf-8') as f:
        return f.read()


def _prompt(relative_path: str) -> str:
    return load_template_text(relative_path).rstrip('\n')


def _simple_prompt(key: str) -> PromptGenerator:
    def generate(project_name: str) -> str:
        return _prompt(f"prompts/{key}.md").format(project_name=project_name)
    return generate


def _no_prompt(project_name: str) -> str:
    # Command templates are always written from their static content
    return ''


def _non_empty_lines(text: str) -> List[str]:
    return [line.strip() for line in text.split('\n') if line.strip()]


# ----------------------------------------------------------------------------
# README.md
# ----------------------------------------------------------------------------

def readme_enhanced_prompt(project_info: ProjectInfo, file_name: str) -> str:
    features = project_info.section(file_name).get('features', '')
    return _prompt("enhanced/readme.md").format(
        name=project_info.name,
        description=project_info.description,
        license=project_info.license,
        features=features,
    )


def readme_render(project_info: ProjectInfo, file_name: str) -> str:
    """Render README.md locally from the 'features' section text."""
    lines = _non_empty_lines(project_info.section(file_name).get('features', ''))

    features_list = '\n'.join(
        f"- {line}" for line in lines
        if 'install' not in line.lower() and 'usage:' not in line.lower()
    )
    if not features_list.strip():
        features_list = '- Feature 1\n- Feature 2\n- Feature 3'

    install_lines = [
        line for line in lines
        if 'install' in line.lower() or 'setup' in line.lower()
    ]
    if install_lines:
        installation = '```bash\n' + '\n'.join(install_lines) + '\n```'
    else:
        installation = '```bash\n# Installation commands\n```'

    usage_lines = [
        line for line in lines
        if any(word in line.lower() for word in ('usage:', 'example:', 'using'))
    ]
    if usage_lines:
        usage = '```bash\n' + '\n'.join(usage_lines) + '\n```'
    else:
        usage = '```bash\n# Usage example\n```'

    return f"""# {project_info.name}

## Overview
{project_info.description}

## Features
{features_list}

## Installation
{installation}

## Usage
{usage}

## Configuration
*Configuration details for your project.*

## Contributing
*Guidelines for contributing to the project.*

## License
{project_info.license}
"""


# ----------------------------------------------------------------------------
# TODO.md
# ----------------------------------------------------------------------------

def todo_enhanced_prompt(project_info: ProjectInfo, file_name: str) -> str:
    plan = project_info.section('PLAN.md')
    return _prompt("enhanced/todo.md").format(
        name=project_info.name,
        description=project_info.description,
        plan_objectives=plan.get('objectives', ''),
        plan_content=json.dumps(dict(plan)) if project_info.has_section('PLAN.md') else '',
    )


def todo_render(project_info: ProjectInfo, file_name: str) -> str:
    """Render TODO.md locally; the first three tasks are high priority, the next three medium."""
    plan_objectives = project_info.section('PLAN.md').get('objectives', '')
    tasks = project_info.section(file_name).get('tasks') or plan_objectives

    high: List[str] = []
    medium: List[str] = []
    low: List[str] = []

    for index, task in enumerate(_non_empty_lines(tasks)):
        formatted = task if task.startswith('- [ ]') else f"- [ ] {task}"
        if index < 3:
            high.append(formatted)
        elif index < 6:
            medium.append(formatted)
        else:
            low.append(formatted)

    high_tasks = '\n'.join(high or ['- [ ] Task 1'])
    medium_tasks = '\n'.join(medium or ['- [ ] Task 2'])
    low_tasks = '\n'.join(low or ['- [ ] Task 3'])

    return f"""# To-Do Items

## Introduction
This document tracks tasks, improvements, and future work items for {project_info.name}.
Mark tasks as completed by changing `[ ]` to `[x]`.

## High Priority
{high_tasks}

## Medium Priority
{medium_tasks}

## Low Priority
{low_tasks}

## Backlog
- [ ] Future task 1
- [ ] Future task 2

## Completed
<!-- Add completed tasks here -->
"""


# ----------------------------------------------------------------------------
# VISION.md
# ----------------------------------------------------------------------------

VALUES_PATTERN = re.compile(r'values?:?(.*?)(?=mission|\n\n|$)', re.IGNORECASE | re.DOTALL)
AUDIENCE_PATTERN = re.compile(r'audience:?(.*?)(?=value|\n\n|$)', re.IGNORECASE | re.DOTALL)
LIST_MARKER = re.compile(r'^-\s*')


def vision_enhanced_prompt(project_info: ProjectInfo, file_name: str) -> str:
    return _prompt("enhanced/vision.md").format(
        name=project_info.name,
        description=project_info.description,
        vision=project_info.section(file_name).get('vision', ''),
    )


def vision_render(project_info: ProjectInfo, file_name: str) -> str:
    """Render VISION.md locally by picking keyword lines out of the 'vision' section."""
    lines = _non_empty_lines(project_info.section(file_name).get('vision', ''))
    joined = '\n'.join(lines)

    vision_statement = ''
    mission_statement = ''
    values_list = '- Value 1\n- Value 2\n- Value 3'
    audience = '- Primary: \n- Secondary: '

    for line in lines:
        lower = line.lower()
        if 'vision' in lower or 'goal' in lower:
            vision_statement = re.sub(r'^.*?vision:?\s*', '', line, count=1, flags=re.IGNORECASE).strip()
        elif 'mission' in lower or 'purpose' in lower:
            mission_statement = re.sub(r'^.*?mission:?\s*', '', line, count=1, flags=re.IGNORECASE).strip()
        elif 'value' in lower or 'principle' in lower:
            match = VALUES_PATTERN.search(joined)
            if match and match.group(1):
                items = [
                    '- ' + LIST_MARKER.sub('', item.strip())
                    for item in match.group(1).split('\n') if item.strip()
                ]
                if items:
                    values_list = '\n'.join(items)
        elif 'audience' in lower or 'user' in lower:
            match = AUDIENCE_PATTERN.search(joined)
            if match and match.group(1):
                audience = match.group(1).strip()

    if not vision_statement and lines:
        vision_statement = lines[0]
    if not mission_statement and len(lines) > 1:
        mission_statement = lines[1]

    vision_statement = vision_statement or "A clear, concise statement of the project's long-term vision and purpose."
    mission_statement = mission_statement or 'What the project aims to accomplish and why it matters.'

    return f"""# Vision

## Project Vision
{vision_statement}

## Mission Statement
{mission_statement}

## Core Values
{values_list}

## Target Audience
{audience}

## Success Criteria
- Success criterion 1
- Success criterion 2
- Success criterion 3

## Strategic Goals
- Short term (3-6 months):
- Medium term (6-12 months):
- Long term (1-3 years):

## Differentiation
What makes this project unique compared to alternatives.
"""


# ----------------------------------------------------------------------------
# Registry
# ----------------------------------------------------------------------------

def _command(key: str, description: str) -> FileTemplate:
    return FileTemplate(
        default_content=load_template_text(f"commands/{key}.md"),
        prompt_generator=_no_prompt,
        description=description,
    )


def _document(key: str, description: str, **kwargs) -> FileTemplate:
    return FileTemplate(
        default_content=load_template_text(f"defaults/{key}.md"),
        prompt_generator=_simple_prompt(key),
        description=description,
        **kwargs
    )


def build_templates() -> Dict[str, FileTemplate]:
    """Build the registry. Insertion order is the non-staged generation order."""
    return {
        f'{COMMANDS_PREFIX}commands/ticket-the-plan.md': _command(
            'ticket-the-plan', 'Claude command for turning PLAN.md into tickets in TODO.md'),
        f'{COMMANDS_PREFIX}commands/clear-todos.md': _command(
            'clear-todos', 'Claude command for implementing tasks from TODO.md'),
        f'{COMMANDS_PREFIX}commands/fix-the-bug.md': _command(
            'fix-the-bug', 'Claude command for debugging and fixing issues from BUG.md'),
        'DEVREF.md': _document('devref', 'Developer reference guide and best practices'),
        'AESTHETIC.md': _document('aesthetic', 'Design principles and style guide'),
        'ARCHITECTURE.md': _document('architecture', 'System architecture and design'),
        'CHECKLIST.md': _document('checklist', 'Pre/post launch tasks and verification checklist'),
        'PLAN.md': _document('plan', 'Project planning document'),
        'TODO.md': _document(
            'todo', 'Task tracking and backlog',
            enhanced_prompt_generator=todo_enhanced_prompt,
            render_template=todo_render),
        'README.md': _document(
            'readme', 'Project overview and documentation',
            enhanced_prompt_generator=readme_enhanced_prompt,
            render_template=readme_render),
        'BUG.md': _document('bug', 'Bug tracking and reporting guidelines'),
        'VISION.md': _document(
            'vision', 'Project vision, mission, and strategic goals',
            enhanced_prompt_generator=vision_enhanced_prompt,
            render_template=vision_render),
    }


TEMPLATES: Dict[str, FileTemplate] = build_templates()
