"""Cloud tool: Google Cloud Platform service and DevOps suggestions for Kotlin applications."""

from typing import Iterable, List

from pydantic import BaseModel, ConfigDict, Field

from kotlin_senior.dispatch.registry import RegisteredTool, ToolDescriptor
from kotlin_senior.models.results import ToolResult, text_result


class SuggestCloudSolutionArgs(BaseModel):
    """Arguments for suggest_cloud_solution."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    usage_scenario: str = Field(
        ...,
        alias="usageScenario",
        description="What the application does (e.g. 'Event driven microservices', 'Simple CRUD API').",
    )
    requirements: List[str] = Field(
        ..., description="Specific requirements (e.g. 'Serverless', 'SQL', 'Global Scale')."
    )


SERVERLESS_COMPUTE = (
    "- **Compute**: Cloud Run (fully managed container platform). "
    "Perfect for Kotlin (using Spring Boot or Ktor with GraalVM/JVM)."
)
KUBERNETES_COMPUTE = "- **Compute**: GKE (Google Kubernetes Engine). Standard for microservices orchestration."
DEFAULT_COMPUTE = "- **Compute**: Cloud Run is recommended as a default for modern stateless apps."
SQL_DATABASE = "- **Database**: Cloud SQL (PostgreSQL recommended for Kotlin/JPA/Exposed)."
DEFAULT_DATABASE = "- **Database**: Firestore (NoSQL) for rapid development and mobile backends."
CI_CD = "- **CI/CD**: Cloud Build. Define `cloudbuild.yaml` to build and deploy your container."
MONITORING = "- **Monitoring**: Cloud Operations Suite (formerly Stackdriver)."

KUBERNETES_KEYWORDS = ("kubernetes", "gke")


def _mentions(requirements: Iterable[str], *keywords: str) -> bool:
    """True if any requirement contains any keyword, case-insensitively."""
    return any(k in r.lower() for r in requirements for k in keywords)


def choose_compute(requirements: List[str]) -> str:
    """Serverless beats Kubernetes, which beats the default."""
    if _mentions(requirements, "serverless"):
        return SERVERLESS_COMPUTE
    if _mentions(requirements, *KUBERNETES_KEYWORDS):
        return KUBERNETES_COMPUTE
    return DEFAULT_COMPUTE


def choose_database(requirements: List[str]) -> str:
    return SQL_DATABASE if _mentions(requirements, "sql") else DEFAULT_DATABASE


def suggest_cloud_solution(args: SuggestCloudSolutionArgs) -> ToolResult:
    """Suggest compute, database, CI/CD and monitoring services for the scenario."""
    lines = [
        choose_compute(args.requirements),
        choose_database(args.requirements),
        CI_CD,
        MONITORING,
    ]
    text = f'### GCP Cloud Solution for "{args.usage_scenario}"\n\n' + "\n".join(lines)
    return text_result(text)


SUGGEST_CLOUD_SOLUTION = RegisteredTool(
    descriptor=ToolDescriptor(
        name="suggest_cloud_solution",
        description="Suggest Google Cloud Platform (GCP) services and DevOps strategies for a Kotlin application.",
        input_model=SuggestCloudSolutionArgs,
    ),
    handler=suggest_cloud_solution,
)


def get_cloud_tools() -> List[RegisteredTool]:
    """Return the cloud tools."""
    return [SUGGEST_CLOUD_SOLUTION]
