"""
Command-line interface for Blueprint.

Provides the init command that scaffolds project documentation, and a list
command that shows the available templates.
"""

import os
import sys
from typing import Optional

import click

from .. import __version__
from .config import LLMConfig, create_sample_env_file, load_environment
from .content_generator import LLMContentGenerator
from .errors import FileSystemError, UserInputError
from .generator import DocumentationGenerator
from .models import ProjectInfo, load_project_info
from .prompts import ProjectInfoCollector
from .templates import TEMPLATES
from ..utils.file_service import FileService
from ..utils.logger_setup import LoggerManager, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Show debug logging')
@click.option('--log-file', type=click.Path(dir_okay=False), help='Also write logs to this file')
def cli(verbose, log_file):
    """Blueprint - Scaffold reference documentation for a project."""
    LoggerManager.setup_logging(log_file=log_file, level="DEBUG" if verbose else "INFO")
    load_environment()


@cli.command()
@click.option('--dir', '-d', 'directory', type=click.Path(file_okay=False),
              help='The directory to initialize (defaults to current directory)')
@click.option('--ai/--no-ai', default=True,
              help='Enable or disable AI-powered content generation')
@click.option('--interactive/--no-interactive', default=True,
              help='Collect project info interactively or use default templates')
@click.option('--info-file', type=click.Path(exists=True, dir_okay=False),
              help='YAML file with project info (skips interactive prompts)')
def init(directory, ai, interactive, info_file):
    """Initialize a project with reference documentation."""
    try:
        target_dir = os.path.abspath(directory or os.getcwd())
        if os.path.exists(target_dir) and not os.path.isdir(target_dir):
            raise FileSystemError(f"{target_dir} is not a directory")

        if create_sample_env_file(target_dir):
            click.echo("ℹ️  Created sample .env file")
        load_environment(target_dir)

        content_generator = None
        if ai:
            config = LLMConfig()
            logger.debug(f"LLM config: {config.to_dict()}")
            content_generator = LLMContentGenerator(config)
            if not content_generator.is_available():
                click.echo(
                    f"⚠️  {config.api_key_env_var} not found or invalid. Using templates instead. "
                    f"Set {config.api_key_env_var} in .env to enable AI generation."
                )

        generator = DocumentationGenerator(TEMPLATES, FileService(), content_generator)

        project_info: Optional[ProjectInfo] = None
        if info_file:
            project_info = load_project_info(info_file)
            click.echo(f"📄 Loaded project info for '{project_info.name}' from {info_file}")
        elif interactive:
            try:
                collector = ProjectInfoCollector()
                project_info = collector.prompt_for_basic_info()

                if not collector.confirm_generation():
                    click.echo("🛑 Documentation generation cancelled.")
                    return
            except (UserInputError, click.exceptions.Abort) as e:
                logger.warning(f"Error in interactive mode: {e}")
                click.echo("⚠️  Falling back to non-interactive mode.")
                project_info = None

        click.echo(f"\n🚀 Initializing documentation in {target_dir}...")
        file_count = generator.generate_documentation(target_dir, project_info)

        if file_count > 0:
            click.echo(f"\n✅ Complete! Generated {file_count} files.")
        else:
            click.echo("\nℹ️  No new files created. All files already exist.")

    except Exception as e:
        logger.debug("Initialization failed", exc_info=True)
        click.echo(f"❌ Error initializing project: {e}", err=True)
        sys.exit(1)


@cli.command(name='list')
def list_templates():
    """List the documentation files Blueprint can generate."""
    width = max(len(name) for name in TEMPLATES)
    click.echo("📋 Documentation templates\n")
    for file_name, template in TEMPLATES.items():
        click.echo(f"  {file_name.ljust(width)}  {template.description}")


def main():
    """Entry point for the blueprint console script."""
    cli()


if __name__ == '__main__':
    main()
