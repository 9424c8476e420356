"""
Design pattern tool: Kotlin implementations of GoF patterns.

Templates are ``string.Template`` strings; ``$name`` is the class-name prefix
derived from the caller's context, ``$$`` escapes Kotlin string interpolation.
"""

import re
from string import Template
from typing import Dict, List, Literal, Tuple

from pydantic import BaseModel, ConfigDict, Field

from kotlin_senior.dispatch.registry import RegisteredTool, ToolDescriptor
from kotlin_senior.models.results import ToolResult, text_result

PatternName = Literal[
    "singleton",
    "factory_method",
    "abstract_factory",
    "builder",
    "adapter",
    "decorator",
    "facade",
    "proxy",
    "chain_of_responsibility",
    "command",
    "observer",
    "strategy",
    "template_method",
]


class GenerateDesignPatternArgs(BaseModel):
    """Arguments for generate_design_pattern."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    pattern_name: PatternName = Field(
        ..., alias="patternName", description="The classic GoF design pattern to generate."
    )
    context: str = Field(
        ...,
        description="The context or use case for this pattern (e.g., 'PaymentProcessor', 'Logger').",
    )


_SINGLETON = Template(
    """object ${name}Manager {
    init {
        println("${name}Manager initialized")
    }

    fun doSomething() {
        // Implementation
    }
}"""
)

_STRATEGY = Template(
    """interface ${name}Strategy {
    fun execute(data: String): String
}

class Concrete${name}StrategyA : ${name}Strategy {
    override fun execute(data: String) = "Strategy A: $$data"
}

class Concrete${name}StrategyB : ${name}Strategy {
    override fun execute(data: String) = "Strategy B: $$data"
}

class ${name}Context(private var strategy: ${name}Strategy) {
    fun setStrategy(strategy: ${name}Strategy) {
        this.strategy = strategy
    }

    fun executeStrategy(data: String): String {
        return strategy.execute(data)
    }
}"""
)

_OBSERVER = Template(
    """interface ${name}Observer {
    fun update(event: String)
}

class ${name}Subject {
    private val observers = mutableListOf<${name}Observer>()

    fun addObserver(observer: ${name}Observer) {
        observers.add(observer)
    }

    fun removeObserver(observer: ${name}Observer) {
        observers.remove(observer)
    }

    fun notifyObservers(event: String) {
        observers.forEach { it.update(event) }
    }
}"""
)

_PLACEHOLDER = Template("// TODO: Implement ${pattern} for ${name}")
_GENERIC = Template("// Pattern ${pattern} not specifically templated yet, but here is a generic structure.")

# pattern -> (code template, explanation)
PATTERN_TEMPLATES: Dict[str, Tuple[Template, str]] = {
    "singleton": (
        _SINGLETON,
        "In Kotlin, `object` is the idiomatic way to implement the Singleton pattern. "
        "It is thread-safe and lazy-loaded by default.",
    ),
    "strategy": (
        _STRATEGY,
        "The Strategy pattern defines a family of algorithms, encapsulates each one, "
        "and makes them interchangeable.",
    ),
    "observer": (
        _OBSERVER,
        "The Observer pattern defines a one-to-many dependency between objects so that when one "
        "object changes state, all its dependents are notified and updated automatically.",
    ),
    "factory_method": (_PLACEHOLDER, "Pattern implementation coming soon."),
    "builder": (_PLACEHOLDER, "Pattern implementation coming soon."),
}

_GENERIC_EXPLANATION = "Generic pattern structure."


def class_name_from_context(context: str) -> str:
    """Strip all whitespace so the context can prefix Kotlin type names."""
    return re.sub(r"\s+", "", context)


def generate_design_pattern(args: GenerateDesignPatternArgs) -> ToolResult:
    """Render the Kotlin template and explanation for the requested pattern."""
    pattern = args.pattern_name
    template, explanation = PATTERN_TEMPLATES.get(pattern, (_GENERIC, _GENERIC_EXPLANATION))
    code = template.substitute(name=class_name_from_context(args.context), pattern=pattern)
    text = f"### {pattern} Pattern for {args.context}\n\n{explanation}\n\n```kotlin\n{code}\n```"
    return text_result(text)


GENERATE_DESIGN_PATTERN = RegisteredTool(
    descriptor=ToolDescriptor(
        name="generate_design_pattern",
        description="Generate a Kotlin implementation of a specific design pattern with best practices.",
        input_model=GenerateDesignPatternArgs,
    ),
    handler=generate_design_pattern,
)


def get_design_pattern_tools() -> List[RegisteredTool]:
    """Return the design pattern tools."""
    return [GENERATE_DESIGN_PATTERN]
