"""Shared pytest fixtures for the Blueprint test suite."""

import os
from unittest.mock import MagicMock, patch

import pytest

from blueprint.src.constants import BRAIN_DUMP_SECTION
from blueprint.src.models import ProjectInfo
from blueprint.src.templates import FileTemplate
from blueprint.utils.file_service import FileService
from blueprint.utils.logger_setup import LoggerManager


LLM_ENV_VARS = [
    "BLUEPRINT_PROVIDER",
    "OPENAI_API_KEY", "OPENAI_MODEL", "OPENAI_BASE_URL", "OPENAI_TEMPERATURE", "OPENAI_MAX_TOKENS",
    "ANTHROPIC_API_KEY", "ANTHROPIC_MODEL", "ANTHROPIC_BASE_URL", "ANTHROPIC_TEMPERATURE",
    "ANTHROPIC_MAX_TOKENS",
]


@pytest.fixture(autouse=True)
def clean_llm_env():
    """Keep developer credentials out of every test and undo .env loading afterwards."""
    with patch.dict(os.environ):
        for var in LLM_ENV_VARS:
            os.environ.pop(var, None)
        yield


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    LoggerManager.reset()


@pytest.fixture
def file_service():
    """FileService double: nothing exists and every write succeeds."""
    service = MagicMock(spec=FileService)
    service.exists.return_value = False
    service.write_file.return_value = True
    service.get_base_name.return_value = "test-project"
    service.resolve_path.side_effect = lambda dir_path, file_name: f"{dir_path}/{file_name}"
    return service


@pytest.fixture
def content_generator():
    """Available content generator double with no canned response."""
    generator = MagicMock()
    generator.is_available.return_value = True
    generator.generate_content.return_value = None
    return generator


@pytest.fixture
def simple_templates():
    return {
        "test1.md": FileTemplate(
            default_content="Default content 1",
            prompt_generator=lambda name: f"Generate for {name} 1",
            description="Test file 1",
        ),
        "test2.md": FileTemplate(
            default_content="Default content 2",
            prompt_generator=lambda name: f"Generate for {name} 2",
            description="Test file 2",
        ),
    }


@pytest.fixture
def brain_dump_info():
    return ProjectInfo(
        name="test-project",
        description="Test project",
        author="Test",
        license="MIT",
        sections={BRAIN_DUMP_SECTION: {"content": "This is a brain dump"}},
    )
