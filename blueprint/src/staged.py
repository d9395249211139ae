"""
Staged (brain dump) document generation.

When the user supplies a brain dump, documents are generated in a fixed order
so that later prompts can quote documents written earlier in the same run.
Each document kind is a StagedDocument naming its prompt template and the
earlier documents it quotes.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Tuple

from .constants import COMMANDS_PREFIX, STAGED_GENERATION_ORDER
from .models import ProjectInfo
from .templates import load_template_text


@dataclass(frozen=True)
class StagedDocument:
    """One document kind in the staged order."""
    file_name: str
    template_key: str
    context_files: Tuple[str, ...] = ()

    def build_prompt(self, project_info: ProjectInfo, generated: Mapping[str, str]) -> str:
        """
        Build the prompt for this document.

        Args:
            project_info: Project info carrying the brain dump
            generated: Content written earlier in this run, keyed by file name

        Returns:
            Prompt text quoting every available context document verbatim
        """
        template = load_template_text(f"staged/{self.template_key}.md").rstrip('\n')
        return template.format(
            name=project_info.name,
            description=project_info.description,
            license=project_info.license,
            brain_dump=project_info.brain_dump,
            context=self._context_block(generated),
        )

    def _context_block(self, generated: Mapping[str, str]) -> str:
        blocks = []
        for file_name in self.context_files:
            content = generated.get(file_name)
            if content:
                # Quoted verbatim; only a missing final newline is added
                if not content.endswith('\n'):
                    content += '\n'
                blocks.append(
                    f"\nThe {file_name} already written for this project:\n---\n{content}---\n"
                )
        return ''.join(blocks)


STAGED_DOCUMENTS: Dict[str, StagedDocument] = {
    doc.file_name: doc for doc in (
        StagedDocument('VISION.md', 'vision'),
        StagedDocument('PLAN.md', 'plan', ('VISION.md',)),
        StagedDocument('README.md', 'readme', ('VISION.md', 'PLAN.md')),
        StagedDocument('AESTHETIC.md', 'aesthetic', ('VISION.md',)),
        StagedDocument('ARCHITECTURE.md', 'architecture', ('VISION.md', 'PLAN.md')),
        StagedDocument('CHECKLIST.md', 'checklist', ('PLAN.md',)),
        StagedDocument('TODO.md', 'todo', ('VISION.md', 'PLAN.md')),
        StagedDocument('BUG.md', 'bug'),
        StagedDocument('DEVREF.md', 'devref', ('PLAN.md',)),
    )
}


def staged_order(registered: Iterable[str]) -> List[str]:
    """
    Compute the staged generation order for the registered file names.

    Names from the fixed order come first (only those registered), followed by
    registered command templates in registry order. Other names are dropped.
    """
    registered = list(registered)
    order = [name for name in STAGED_GENERATION_ORDER if name in registered]
    order.extend(
        name for name in registered
        if name.startswith(COMMANDS_PREFIX) and name not in order
    )
    return order


def build_staged_prompt(file_name: str, project_info: ProjectInfo, generated: Mapping[str, str]) -> str:
    """Prompt for file_name in staged mode; files without a staged document get an empty prompt."""
    document = STAGED_DOCUMENTS.get(file_name)
    if document is None:
        return ''
    return document.build_prompt(project_info, generated)
