"""Architecture tool: package-structure advice for Clean, Hexagonal and other Kotlin architectures."""

from typing import Dict, List, Literal, Tuple

from pydantic import BaseModel, ConfigDict, Field

from kotlin_senior.dispatch.registry import RegisteredTool, ToolDescriptor
from kotlin_senior.models.results import ToolResult, text_result

ProjectType = Literal["monolith", "microservice", "library"]
ArchitectureGoal = Literal["clean_architecture", "hexagonal", "modular_monolith", "refactor_legacy"]


class AnalyzeArchitectureArgs(BaseModel):
    """Arguments for analyze_architecture."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    project_type: ProjectType = Field(..., alias="projectType", description="The type of the project.")
    current_structure_description: str = Field(
        ...,
        alias="currentStructureDescription",
        description="Brief description of the current folder/package structure.",
    )
    goal: ArchitectureGoal = Field(..., description="The architectural goal.")


_CLEAN_STRUCTURE = """
src/
  domain/          (Enterprise Business Rules - Entities)
  usecase/         (Application Business Rules)
  adapter/         (Interface Adapters)
    controller/
    presenter/
    gateway/       (Repo implementations)
  infrastructure/  (Frameworks & Drivers)
    db/
    web/
"""

_HEXAGONAL_STRUCTURE = """
src/
  domain/
    model/
    port/
      in/  (Use Cases)
      out/ (Repository Interfaces)
  adapter/
    in/
      web/ (Controllers)
    out/
      persistence/ (Database Adapters)
  application/
    service/ (Implementation of Use Cases)
"""

_HEXAGONAL_ADVICE = (
    "Hexagonal Architecture (Ports and Adapters) focuses on isolating the domain logic from the outside world.\n"
    "Primary Ports (Driving): Use Cases / Input Ports.\n"
    "Secondary Ports (Driven): Repository Interfaces / Output Ports."
)

_FALLBACK_ADVICE = "Choose a goal like clean_architecture or hexagonal for detailed advice."
_FALLBACK_STRUCTURE = "\nStandard Kotlin structure recommended.\n"

KOTLIN_TIPS: List[str] = [
    "- Use `data class` for Domain Entities.",
    "- Use `sealed class` for Domain Errors or Result types.",
    "- Use Coroutines `suspend` functions in your Ports/UseCases for I/O operations.",
]


def _clean_architecture_advice(project_type: str) -> str:
    return (
        f"For a {project_type} aiming for Clean Architecture in Kotlin, strict separation of concerns is key.\n"
        "Dependency Rule: Source code dependencies can only point inwards.\n"
        "Result: Independent of Frameworks, Testable, Independent of UI, Independent of Database."
    )


def _advice_for(goal: str, project_type: str) -> Tuple[str, str]:
    """Return (advice, package structure) for a goal."""
    if goal == "clean_architecture":
        return _clean_architecture_advice(project_type), _CLEAN_STRUCTURE
    templates: Dict[str, Tuple[str, str]] = {
        "hexagonal": (_HEXAGONAL_ADVICE, _HEXAGONAL_STRUCTURE),
    }
    return templates.get(goal, (_FALLBACK_ADVICE, _FALLBACK_STRUCTURE))


def analyze_architecture(args: AnalyzeArchitectureArgs) -> ToolResult:
    """Render architecture advice and a suggested package layout for the requested goal."""
    advice, structure = _advice_for(args.goal, args.project_type)
    text = (
        f"### Architectural Analysis for {args.project_type}\n\n"
        f"**Goal**: {args.goal}\n\n"
        f"{advice}\n\n"
        f"### Suggested Kotlin Package Structure:\n```text{structure}```\n\n"
        "### Kotlin Specific Tips:\n" + "\n".join(KOTLIN_TIPS)
    )
    return text_result(text)


ANALYZE_ARCHITECTURE = RegisteredTool(
    descriptor=ToolDescriptor(
        name="analyze_architecture",
        description=(
            "Analyze and suggest architectural improvements for a Kotlin project based on "
            "Clean Architecture, Hexagonal, or Monolith patterns."
        ),
        input_model=AnalyzeArchitectureArgs,
    ),
    handler=analyze_architecture,
)


def get_architecture_tools() -> List[RegisteredTool]:
    """Return the architecture tools."""
    return [ANALYZE_ARCHITECTURE]
