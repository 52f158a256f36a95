from __future__ import annotations

import logging
from pathlib import Path

from scaffoldcheck.assertions.base import AssertionResult
from scaffoldcheck.assertions.deterministic import (
    check_dependency,
    check_manifest_field,
    check_model_count,
    check_model_loads,
    check_path_exists,
    check_text_contains,
)
from scaffoldcheck.config import ChecklistConfig
from scaffoldcheck.ecosystems import get_ecosystem
from scaffoldcheck.manifest import load_manifest
from scaffoldcheck.metrics import RunResult, SectionResult, Tally
from scaffoldcheck.reporting import console
from scaffoldcheck.verbose import setup_logger

SECTIONS: list[tuple[str, str]] = [
    ("dependencies", "📦 Checking Dependencies..."),
    ("structure", "📁 Checking File Structure..."),
    ("configuration", "⚙️  Checking Configuration..."),
    ("models", "🗄️  Checking Database Models..."),
    ("container", "🐳 Checking Dockerfile..."),
]


class Runner:
    """Runs the checklist against a project root, one section after another."""

    def __init__(
        self,
        config: ChecklistConfig,
        project_root: Path,
        logger: logging.Logger | None = None,
    ):
        self.config = config
        self.project_root = Path(project_root)
        self.logger = logger or setup_logger()
        self.ecosystem = get_ecosystem(config.ecosystem.value, load_timeout=config.load_timeout)
        self.tally = Tally()
        self._section: SectionResult | None = None

    def execute(self) -> RunResult:
        """Run every check in order, print the summary and return the result."""
        self.tally = Tally()
        sections: list[SectionResult] = []

        self.logger.debug(f"Checking project root {self.project_root.resolve()}")
        self.logger.debug(f"Declared server port {self.config.port}")
        console.print_header(self.config.port)

        steps = {
            "dependencies": self._check_dependencies,
            "structure": self._check_structure,
            "configuration": self._check_configuration,
            "models": self._check_models,
            "container": self._check_container,
        }
        for name, title in SECTIONS:
            self._section = SectionResult(name=name, title=title)
            sections.append(self._section)
            console.print_section(title)
            steps[name]()
            self.logger.debug(
                f"Section '{name}' done: {self._section.failures} failure(s) "
                f"of {len(self._section.assertions)}"
            )
        self._section = None

        console.print_summary(self.tally)
        self.logger.debug(
            f"Run complete: {self.tally.passed}/{self.tally.run} passed, "
            f"{self.tally.failed} failed"
        )
        return RunResult(tally=self.tally, sections=sections, port=self.config.port)

    def _record(self, result: AssertionResult) -> None:
        self.tally.record(result)
        if self._section is not None:
            self._section.assertions.append(result)
        console.print_result(result)

    def _warn(self, message: str) -> None:
        if self._section is not None:
            self._section.warnings.append(message)
        self.logger.warning(message)
        console.print_warning(message)

    def _check_dependencies(self) -> None:
        for dep in self.config.dependencies:
            self._record(
                check_dependency(
                    self.project_root, dep.name, dep.display, self.ecosystem, self.logger
                )
            )

    def _check_structure(self) -> None:
        structure = self.config.structure
        for relpath in structure.files:
            self._record(
                check_path_exists(self.project_root, relpath, f"{relpath} exists", self.logger)
            )
        for relpath in structure.directories:
            self._record(
                check_path_exists(
                    self.project_root, relpath, f"{relpath} directory exists", self.logger
                )
            )

    def _check_configuration(self) -> None:
        cfg = self.config.configuration

        # Optional file: reported but never tallied
        if cfg.env_example:
            if (self.project_root / cfg.env_example).exists():
                console.print_note(f"{cfg.env_example} file exists")
            else:
                self._warn(f"{cfg.env_example} not found (optional)")

        manifest = None
        load_error = None
        try:
            manifest = load_manifest(self.project_root / cfg.manifest)
        except (OSError, ValueError) as e:
            load_error = str(e)
            self.logger.error(f"Could not load {cfg.manifest}: {e}")

        for manifest_field in cfg.fields:
            self._record(
                check_manifest_field(
                    manifest,
                    manifest_field.path,
                    manifest_field.display(cfg.manifest),
                    self.logger,
                    load_error=load_error,
                )
            )

    def _check_models(self) -> None:
        models = self.config.models
        models_dir = self.project_root / models.directory

        if not models_dir.is_dir():
            self.logger.warning(f"Models directory {models.directory} not found")
            self._record(
                AssertionResult(
                    name=f"path_exists:{models.directory}",
                    passed=False,
                    message="Models directory exists",
                )
            )
            return

        model_files = sorted(
            p
            for p in models_dir.iterdir()
            if p.is_file() and self.ecosystem.is_model_file(p.name, models.extension)
        )
        self._record(check_model_count(models.directory, len(model_files), self.logger))

        for model_file in model_files:
            self._record(
                check_model_loads(self.project_root, model_file, self.ecosystem, self.logger)
            )

    def _check_container(self) -> None:
        container = self.config.container
        descriptor = self.project_root / container.descriptor

        if not descriptor.exists():
            self.logger.warning(f"{container.descriptor} not found, skipping keyword checks")
            self._record(
                AssertionResult(
                    name=f"path_exists:{container.descriptor}",
                    passed=False,
                    message=f"{container.descriptor} exists",
                )
            )
            return

        try:
            content = descriptor.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            self._record(
                AssertionResult(
                    name=f"readable:{container.descriptor}",
                    passed=False,
                    message=f"{container.descriptor} is readable - Error: {e}",
                )
            )
            return

        for keyword in container.keywords:
            self._record(
                check_text_contains(
                    content,
                    keyword,
                    f"{container.descriptor} has {keyword} instruction",
                    self.logger,
                    source=container.descriptor,
                )
            )
