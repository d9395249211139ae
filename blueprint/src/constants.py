"""
Shared constants for blueprint.

Centralizes file names, generation order and defaults used across modules.
"""

# Section key holding the free-form brain dump inside ProjectInfo.sections
BRAIN_DUMP_SECTION = '_brainDump'

DEFAULT_DESCRIPTION = 'A new software project.'
DEFAULT_LICENSE = 'MIT'

LICENSE_CHOICES = ['MIT', 'Apache-2.0', 'GPL-3.0', 'BSD-3-Clause', 'Proprietary', 'Other']

# Longest first line / sentence accepted as a short description
MAX_DESCRIPTION_LENGTH = 100

# Output files under this directory are automation command templates
COMMANDS_PREFIX = '.claude/'

# Staged generation order: later documents may quote earlier ones
STAGED_GENERATION_ORDER = [
    'VISION.md',
    'PLAN.md',
    'README.md',
    'AESTHETIC.md',
    'ARCHITECTURE.md',
    'CHECKLIST.md',
    'TODO.md',
    'BUG.md',
    'DEVREF.md',
]

SYSTEM_PROMPT = (
    'You are a helpful assistant that generates project documentation. '
    'Respond with markdown content only, no explanations.'
)
