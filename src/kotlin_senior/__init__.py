"""
kotlin_senior: MCP tool server giving senior-level Kotlin advice.

This package provides the tool registry and dispatcher, the five advisory
tools (architecture, design patterns, best practices, test templates, cloud),
and the stdio MCP server that exposes them.
"""

__version__ = "1.0.0"
