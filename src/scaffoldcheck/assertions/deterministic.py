"""Deterministic assertion checks (dependencies, paths, manifest, models, content)."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from scaffoldcheck.assertions.base import AssertionResult
from scaffoldcheck.ecosystems.base import BaseEcosystem
from scaffoldcheck.manifest import has_field


def check_dependency(
    project_root: str | Path,
    dependency: str,
    label: str,
    ecosystem: BaseEcosystem,
    logger: logging.Logger,
) -> AssertionResult:
    """Check that a dependency resolves; any raised error counts as absent."""
    logger.info(f"Resolving dependency {dependency} ({ecosystem.name()})")

    try:
        ecosystem.resolve(dependency, Path(project_root), logger)
        passed = True
    except Exception as e:
        logger.warning(f"Dependency {dependency} did not resolve: {e}")
        passed = False

    return AssertionResult(
        name=f"dependency:{dependency}",
        passed=passed,
        message=label,
    )


def check_path_exists(
    project_root: str | Path, relpath: str, label: str, logger: logging.Logger
) -> AssertionResult:
    """Check that a file or directory exists under the project root."""
    path = Path(project_root) / relpath
    logger.info(f"Checking path exists: {relpath}")

    passed = path.exists()
    logger.info(f"Path {relpath} exists={passed}")

    return AssertionResult(name=f"path_exists:{relpath}", passed=passed, message=label)


def check_manifest_field(
    manifest: dict[str, Any] | None,
    field_path: str,
    label: str,
    logger: logging.Logger,
    load_error: str | None = None,
) -> AssertionResult:
    """Check that a dotted manifest field is present and truthy.

    A manifest that failed to load (``manifest is None``) fails every field,
    with the load error appended to the label.
    """
    name = f"manifest_field:{field_path}"
    if manifest is None:
        logger.warning(f"Manifest unavailable, {field_path} fails")
        message = f"{label} - Error: {load_error}" if load_error else label
        return AssertionResult(name=name, passed=False, message=message)

    passed = has_field(manifest, field_path)
    logger.info(f"Manifest field {field_path} present={passed}")
    return AssertionResult(name=name, passed=passed, message=label)


def check_model_count(directory: str, count: int, logger: logging.Logger) -> AssertionResult:
    """Check that a models directory holds at least one model file."""
    logger.info(f"Found {count} model file(s) in {directory}")
    return AssertionResult(
        name=f"model_count:{directory}",
        passed=count > 0,
        message=f"Found {count} model file(s)",
    )


def check_model_loads(
    project_root: str | Path,
    path: Path,
    ecosystem: BaseEcosystem,
    logger: logging.Logger,
) -> AssertionResult:
    """Load a model file and check its exported value is defined."""
    label = f"{path.name} exports successfully"
    name = f"model_loads:{path.name}"

    try:
        defined = ecosystem.load(path, Path(project_root), logger)
    except Exception as e:
        logger.error(f"Error loading {path.name}: {e}")
        return AssertionResult(name=name, passed=False, message=f"{label} - Error: {e}")

    if not defined:
        logger.warning(f"{path.name} loaded but exports nothing")
    return AssertionResult(name=name, passed=defined, message=label)


def check_text_contains(
    text: str, keyword: str, label: str, logger: logging.Logger, source: str = ""
) -> AssertionResult:
    """Check that a keyword occurs anywhere in text (plain substring search)."""
    passed = keyword in text
    logger.info(f"Keyword '{keyword}' found={passed} in {source or 'text'}")
    return AssertionResult(
        name=f"contains:{source}:{keyword}" if source else f"contains:{keyword}",
        passed=passed,
        message=label,
    )
