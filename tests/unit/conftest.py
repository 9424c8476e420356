"""Pytest configuration and fixtures for unit tests."""

from typing import Any, Dict

import pytest

from kotlin_senior.dispatch.invoker import ToolInvoker
from kotlin_senior.dispatch.registry import ToolRegistry
from kotlin_senior.tools import get_default_registry


@pytest.fixture
def registry() -> ToolRegistry:
    """Registry with the five catalog tools."""
    return get_default_registry()


@pytest.fixture
def invoker(registry: ToolRegistry) -> ToolInvoker:
    return ToolInvoker(registry)


@pytest.fixture
def valid_arguments() -> Dict[str, Dict[str, Any]]:
    """One valid argument payload per catalog tool."""
    return {
        "analyze_architecture": {
            "projectType": "monolith",
            "currentStructureDescription": "Everything lives in one package",
            "goal": "clean_architecture",
        },
        "generate_design_pattern": {"patternName": "strategy", "context": "Payment Processor"},
        "check_best_practices": {"codeSnippet": "val user = repo.find(id)!!"},
        "generate_test_template": {
            "className": "UserService",
            "testType": "unit",
            "dependencies": ["UserRepository", "EmailService"],
        },
        "suggest_cloud_solution": {
            "usageScenario": "Simple CRUD API",
            "requirements": ["Serverless", "SQL"],
        },
    }
