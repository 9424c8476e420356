"""
Best-practices tool: flags common Kotlin anti-patterns with substring heuristics.

The checks are literal substring matches, not parsing; they can match inside
comments or string literals.
"""

from dataclasses import dataclass
from typing import Callable, List

from pydantic import BaseModel, ConfigDict, Field

from kotlin_senior.dispatch.registry import RegisteredTool, ToolDescriptor
from kotlin_senior.models.results import ToolResult, text_result


class CheckBestPracticesArgs(BaseModel):
    """Arguments for check_best_practices."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    code_snippet: str = Field(..., alias="codeSnippet", description="The Kotlin code to analyze.")


@dataclass(frozen=True)
class Heuristic:
    """A named check and the suggestion emitted when it matches."""

    name: str
    matches: Callable[[str], bool]
    suggestion: str


HEURISTICS: List[Heuristic] = [
    Heuristic(
        name="not_null_assertion",
        matches=lambda code: "!!" in code,
        suggestion=(
            "- Avoid using `!!` (not-null assertion). Use `?` safe calls or `?:` Elvis operator "
            "instead to prevent NullPointerExceptions."
        ),
    ),
    Heuristic(
        name="global_scope",
        matches=lambda code: "GlobalScope" in code,
        suggestion=(
            "- Avoid `GlobalScope`. Use structured concurrency with `viewModelScope`, "
            "`lifecycleScope`, or a custom CoroutineScope."
        ),
    ),
    Heuristic(
        name="var_without_val",
        matches=lambda code: "var " in code and "val " not in code,
        suggestion=(
            "- Prefer `val` (immutable) over `var` (mutable) where possible to ensure thread "
            "safely and predictability."
        ),
    ),
    Heuristic(
        name="println_logging",
        matches=lambda code: "println" in code,
        suggestion="- Use a standard Logging framework (e.g., SLF4J or Timber) instead of `println`.",
    ),
]

CLEAN_CODE_NOTES: List[str] = [
    "Code looks clean regarding basic heuristics. Ensure you are following SOLID principles:",
    "- Single Responsibility: Each class should have one job.",
    "- Open/Closed: Open for extension, closed for modification.",
]


def find_issues(code_snippet: str) -> List[str]:
    """Suggestions for every heuristic that matches, in heuristic order."""
    return [h.suggestion for h in HEURISTICS if h.matches(code_snippet)]


def check_best_practices(args: CheckBestPracticesArgs) -> ToolResult:
    """Report matched anti-patterns, or a SOLID reminder when nothing matches."""
    suggestions = find_issues(args.code_snippet) or list(CLEAN_CODE_NOTES)
    return text_result("### Best Practices Analysis\n\n" + "\n".join(suggestions))


CHECK_BEST_PRACTICES = RegisteredTool(
    descriptor=ToolDescriptor(
        name="check_best_practices",
        description=(
            "Analyze Kotlin code snippets for common anti-patterns and suggest improvements "
            "based on SOLID and optimization principles."
        ),
        input_model=CheckBestPracticesArgs,
    ),
    handler=check_best_practices,
)


def get_code_analysis_tools() -> List[RegisteredTool]:
    """Return the code analysis tools."""
    return [CHECK_BEST_PRACTICES]
