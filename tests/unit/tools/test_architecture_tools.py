"""Unit tests for analyze_architecture."""

import pytest

from kotlin_senior.tools.architecture_tools import (
    KOTLIN_TIPS,
    AnalyzeArchitectureArgs,
    analyze_architecture,
)


def _run(goal: str, project_type: str = "monolith") -> str:
    args = AnalyzeArchitectureArgs(
        projectType=project_type,
        currentStructureDescription="controllers and repositories in one module",
        goal=goal,
    )
    return analyze_architecture(args).text


class TestAnalyzeArchitecture:
    def test_clean_architecture_mentions_name_and_layers(self) -> None:
        text = _run("clean_architecture")
        assert "Clean Architecture" in text
        assert "usecase/" in text
        assert "infrastructure/" in text
        assert "Dependency Rule" in text

    @pytest.mark.parametrize("project_type", ["monolith", "microservice", "library"])
    def test_project_type_only_changes_interpolation(self, project_type: str) -> None:
        text = _run("clean_architecture", project_type)
        baseline = _run("clean_architecture", "monolith")
        assert "Clean Architecture" in text
        assert text.replace(project_type, "monolith") == baseline

    def test_hexagonal_ports_and_adapters(self) -> None:
        text = _run("hexagonal")
        assert "Ports and Adapters" in text
        assert "port/" in text
        assert "persistence/" in text

    @pytest.mark.parametrize("goal", ["modular_monolith", "refactor_legacy"])
    def test_other_goals_get_fallback_advice(self, goal: str) -> None:
        text = _run(goal)
        assert f"**Goal**: {goal}" in text
        assert "Choose a goal like clean_architecture or hexagonal" in text
        assert "Standard Kotlin structure recommended." in text

    def test_layout_and_tips(self) -> None:
        text = _run("hexagonal", "library")
        assert text.startswith("### Architectural Analysis for library\n\n")
        assert "**Goal**: hexagonal\n\nHexagonal Architecture" in text
        assert "controllers and repositories" not in text
        assert "```text\n" in text
        assert text.endswith(KOTLIN_TIPS[-1])
        for tip in KOTLIN_TIPS:
            assert tip in text
