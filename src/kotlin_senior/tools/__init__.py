"""
The tool catalog: five advisory tools for Kotlin projects.

``get_all_tools`` returns them in advertised order; ``get_default_registry``
builds the read-only registry the server dispatches against.
"""

from typing import List, Union

from kotlin_senior.dispatch.registry import RegisteredTool, ToolRegistry
from kotlin_senior.tools.architecture_tools import AnalyzeArchitectureArgs, get_architecture_tools
from kotlin_senior.tools.cloud_tools import SuggestCloudSolutionArgs, get_cloud_tools
from kotlin_senior.tools.code_analysis_tools import CheckBestPracticesArgs, get_code_analysis_tools
from kotlin_senior.tools.design_pattern_tools import GenerateDesignPatternArgs, get_design_pattern_tools
from kotlin_senior.tools.test_tools import GenerateTestTemplateArgs, get_test_tools

ToolArguments = Union[
    AnalyzeArchitectureArgs,
    GenerateDesignPatternArgs,
    CheckBestPracticesArgs,
    GenerateTestTemplateArgs,
    SuggestCloudSolutionArgs,
]


def get_all_tools() -> List[RegisteredTool]:
    """Return every catalog tool in advertised order."""
    return [
        *get_architecture_tools(),
        *get_design_pattern_tools(),
        *get_code_analysis_tools(),
        *get_test_tools(),
        *get_cloud_tools(),
    ]


def get_default_registry() -> ToolRegistry:
    """Build the registry of all catalog tools."""
    return ToolRegistry(get_all_tools())


__all__ = [
    "AnalyzeArchitectureArgs",
    "CheckBestPracticesArgs",
    "GenerateDesignPatternArgs",
    "GenerateTestTemplateArgs",
    "SuggestCloudSolutionArgs",
    "ToolArguments",
    "get_all_tools",
    "get_default_registry",
]
