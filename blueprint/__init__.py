"""
Scaffolds reference documentation for software projects.

Blueprint writes README, VISION, PLAN, ARCHITECTURE and related markdown files
into a project directory. When an LLM API key is configured the documents are
tailored to the project; otherwise static templates are used.

Typical usage example:

from blueprint.src import DocumentationGenerator, TEMPLATES
from blueprint.utils import FileService
count = DocumentationGenerator(TEMPLATES, FileService()).generate_documentation(".")
"""

__version__ = "1.0.0"
__author__ = "Blueprint Contributors"
