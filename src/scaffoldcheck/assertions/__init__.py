"""Assertion system for checking a project's scaffolding."""

from scaffoldcheck.assertions.base import AssertionResult
from scaffoldcheck.assertions.deterministic import (
    check_dependency,
    check_manifest_field,
    check_model_count,
    check_model_loads,
    check_path_exists,
    check_text_contains,
)

__all__ = [
    "AssertionResult",
    "check_dependency",
    "check_manifest_field",
    "check_model_count",
    "check_model_loads",
    "check_path_exists",
    "check_text_contains",
]
