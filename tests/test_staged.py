"""Tests for staged (brain dump) prompt building."""

from blueprint.src.constants import BRAIN_DUMP_SECTION
from blueprint.src.models import ProjectInfo
from blueprint.src.staged import STAGED_DOCUMENTS, build_staged_prompt, staged_order
from blueprint.src.templates import TEMPLATES


def _info(brain_dump="We want a CLI that writes docs."):
    return ProjectInfo(
        name="docgen",
        description="Doc generator",
        license="BSD-3-Clause",
        sections={BRAIN_DUMP_SECTION: {"content": brain_dump}},
    )


def test_staged_order_for_full_registry():
    assert staged_order(TEMPLATES.keys()) == [
        "VISION.md", "PLAN.md", "README.md", "AESTHETIC.md", "ARCHITECTURE.md",
        "CHECKLIST.md", "TODO.md", "BUG.md", "DEVREF.md",
        ".claude/commands/ticket-the-plan.md",
        ".claude/commands/clear-todos.md",
        ".claude/commands/fix-the-bug.md",
    ]


def test_staged_order_keeps_only_registered_names():
    order = staged_order(["NOTES.md", "TODO.md", ".claude/commands/x.md", "VISION.md"])

    assert order == ["VISION.md", "TODO.md", ".claude/commands/x.md"]


def test_every_staged_document_has_a_prompt():
    for file_name in STAGED_DOCUMENTS:
        prompt = build_staged_prompt(file_name, _info(), {})
        assert f"{file_name} file for a project named \"docgen\"" in prompt
        assert "We want a CLI that writes docs." in prompt


def test_vision_prompt_has_no_context():
    prompt = build_staged_prompt("VISION.md", _info(), {"PLAN.md": "plan text"})

    assert "already written" not in prompt
    assert "plan text" not in prompt


def test_plan_prompt_quotes_vision_verbatim():
    vision = "# Vision\n\nEvery repo documents itself.\n"

    prompt = build_staged_prompt("PLAN.md", _info(), {"VISION.md": vision})

    assert "The VISION.md already written for this project:\n---\n# Vision\n\nEvery repo documents itself.\n---" in prompt


def test_readme_prompt_quotes_vision_and_plan_in_order():
    prompt = build_staged_prompt(
        "README.md", _info(), {"PLAN.md": "PLAN BODY", "VISION.md": "VISION BODY"}
    )

    assert "The license is: BSD-3-Clause" in prompt
    assert prompt.index("VISION BODY") < prompt.index("PLAN BODY")


def test_missing_context_is_left_out():
    prompt = build_staged_prompt("TODO.md", _info(), {"VISION.md": "VISION BODY"})

    assert "VISION BODY" in prompt
    assert "PLAN.md already written" not in prompt


def test_context_files():
    assert STAGED_DOCUMENTS["PLAN.md"].context_files == ("VISION.md",)
    assert STAGED_DOCUMENTS["ARCHITECTURE.md"].context_files == ("VISION.md", "PLAN.md")
    assert STAGED_DOCUMENTS["CHECKLIST.md"].context_files == ("PLAN.md",)
    assert STAGED_DOCUMENTS["BUG.md"].context_files == ()


def test_unknown_file_gets_empty_prompt():
    assert build_staged_prompt(".claude/commands/clear-todos.md", _info(), {}) == ""
    assert build_staged_prompt("NOTES.md", _info(), {}) == ""


def test_context_keeps_trailing_blank_lines():
    vision = "# Vision\n\nBody text.\n\n"

    prompt = build_staged_prompt("PLAN.md", _info(), {"VISION.md": vision})

    assert vision in prompt
    assert "---\n# Vision\n\nBody text.\n\n---\n" in prompt


def test_context_without_final_newline_is_closed():
    prompt = build_staged_prompt("PLAN.md", _info(), {"VISION.md": "# Vision  "})

    assert "---\n# Vision  \n---\n" in prompt
