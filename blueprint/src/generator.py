"""
Documentation generation pipeline.

Writes every registered documentation file that does not exist yet, using a
content generator when one is available and the static templates otherwise.
"""

from typing import Dict, List, Mapping, Optional

from .content_generator import ContentGenerator
from .models import ProjectInfo, default_project_info
from .staged import build_staged_prompt, staged_order
from .templates import FileTemplate
from ..utils.file_service import FileService
from ..utils.logger_setup import get_logger

logger = get_logger(__name__)


class DocumentationGenerator:
    """Generates documentation files for a project directory."""

    def __init__(
        self,
        templates: Mapping[str, FileTemplate],
        file_service: FileService,
        content_generator: Optional[ContentGenerator] = None
    ):
        """
        Initialize DocumentationGenerator.

        Args:
            templates: Output file name -> template
            file_service: File access layer used for every check and write
            content_generator: Optional generator for AI-written content
        """
        self.templates = templates
        self.file_service = file_service
        self.content_generator = content_generator

    def generate_documentation(self, dir_path: str, project_info: Optional[ProjectInfo] = None) -> int:
        """
        Generate all missing documentation files in dir_path.

        Files that already exist are never touched. When the project info
        carries a brain dump, files are generated in the staged order and
        later prompts quote the documents written earlier in this run.

        Args:
            dir_path: Directory to generate files in
            project_info: Collected project info. Synthesized from the
                directory name when omitted.

        Returns:
            Number of files written
        """
        info = project_info or default_project_info(self.file_service.get_base_name(dir_path))
        staged = info.is_staged
        order = self._generation_order(staged)

        # Content written during this run, quoted by later staged prompts
        generated: Dict[str, str] = {}
        created_count = 0

        logger.debug(f"Generating {len(order)} file(s) in {'staged' if staged else 'registry'} order")

        for file_name in order:
            template = self.templates[file_name]
            file_path = self.file_service.resolve_path(dir_path, file_name)

            if self.file_service.exists(file_path):
                logger.info(f"{file_name} already exists, skipping")
                continue

            content = self._generate_with_ai(file_name, template, info, staged, generated)

            if content:
                logger.info(f"Using AI-generated content for {file_name}")
            else:
                content = self._fallback_content(file_name, template, info)

            if not self.file_service.write_file(file_path, content):
                logger.error(f"Failed to create {file_name}")
                continue

            logger.info(f"Created {file_name}")
            created_count += 1
            if staged:
                generated[file_name] = content

        return created_count

    def _generation_order(self, staged: bool) -> List[str]:
        if staged:
            return staged_order(self.templates.keys())
        return list(self.templates.keys())

    def _build_prompt(
        self,
        file_name: str,
        template: FileTemplate,
        info: ProjectInfo,
        staged: bool,
        generated: Mapping[str, str]
    ) -> str:
        if staged:
            return build_staged_prompt(file_name, info, generated)
        if template.enhanced_prompt_generator and info.has_section(file_name):
            return template.enhanced_prompt_generator(info, file_name)
        return template.prompt_generator(info.name)

    def _generate_with_ai(
        self,
        file_name: str,
        template: FileTemplate,
        info: ProjectInfo,
        staged: bool,
        generated: Mapping[str, str]
    ) -> Optional[str]:
        """Ask the content generator for file_name; any failure yields None."""
        if self.content_generator is None or not self.content_generator.is_available():
            return None

        try:
            prompt = self._build_prompt(file_name, template, info, staged, generated)
            if not prompt:
                return None

            logger.info(f"Generating {file_name} with AI...")
            return self.content_generator.generate_content(prompt)
        except Exception as e:
            logger.error(f"Error generating content for {file_name}: {e}")
            return None

    def _fallback_content(self, file_name: str, template: FileTemplate, info: ProjectInfo) -> str:
        if template.render_template and info.has_section(file_name):
            logger.info(f"Rendering {file_name} from project info")
            return template.render_template(info, file_name)

        logger.info(f"Using template for {file_name}")
        return template.default_content
