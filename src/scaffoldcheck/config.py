from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_CONFIG_NAME = "scaffoldcheck.yaml"


class Ecosystem(str, Enum):
    NODE = "node"
    PYTHON = "python"


class DependencySpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    label: str | None = None

    @property
    def display(self) -> str:
        return self.label or f"{self.name} is installed"


class ManifestField(BaseModel):
    model_config = ConfigDict(extra="forbid")
    path: str
    label: str | None = None

    def display(self, manifest: str) -> str:
        return self.label or f"{manifest} has {self.path}"


class StructureConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    files: list[str] = ["src/server.js", "package.json", "Dockerfile"]
    directories: list[str] = ["src/controllers", "src/models", "src/middleware"]


class ConfigurationConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    env_example: str | None = ".env.example"
    manifest: str = "package.json"
    fields: list[ManifestField] = [
        ManifestField(path="scripts.start", label="package.json has start script"),
        ManifestField(path="dependencies.express", label="Express is in dependencies"),
        ManifestField(path="dependencies.mongoose", label="Mongoose is in dependencies"),
    ]

    @field_validator("fields", mode="before")
    @classmethod
    def normalize_fields(cls, v: Any) -> Any:
        if not isinstance(v, list):
            return v
        result = []
        for item in v:
            if isinstance(item, str):
                result.append(ManifestField(path=item))
            else:
                result.append(item)
        return result


class ModelsConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    directory: str = "src/models"
    extension: str = ".js"

    @field_validator("extension")
    @classmethod
    def extension_has_dot(cls, v: str) -> str:
        if not v:
            raise ValueError("extension must not be empty")
        return v if v.startswith(".") else f".{v}"


class ContainerConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    descriptor: str = "Dockerfile"
    keywords: list[str] = ["FROM", "WORKDIR", "COPY", "EXPOSE", "CMD"]


class ChecklistConfig(BaseModel):
    """The fixed checklist run against a project root.

    Every field has a default, so ``ChecklistConfig()`` is the built-in
    checklist for an Express/Mongoose backend.
    """

    model_config = ConfigDict(extra="forbid")

    # Declared for the server under test; no check connects to it.
    port: int = Field(default="${TEST_PORT:-5001}", ge=1, le=65535, validate_default=True)
    ecosystem: Ecosystem = Ecosystem.NODE
    load_timeout: int = Field(default=30, ge=1)
    dependencies: list[DependencySpec] = [
        DependencySpec(name="express", label="Express is installed"),
        DependencySpec(name="mongoose", label="Mongoose is installed"),
        DependencySpec(name="cors", label="CORS is installed"),
        DependencySpec(name="dotenv", label="Dotenv is installed"),
    ]
    structure: StructureConfig = StructureConfig()
    configuration: ConfigurationConfig = ConfigurationConfig()
    models: ModelsConfig = ModelsConfig()
    container: ContainerConfig = ContainerConfig()

    @field_validator("port", mode="before")
    @classmethod
    def expand_port(cls, v: Any) -> Any:
        if isinstance(v, str):
            return expandvars(v).strip()
        return v

    @field_validator("dependencies", mode="before")
    @classmethod
    def normalize_dependencies(cls, v: Any) -> Any:
        if not isinstance(v, list):
            return v
        result = []
        for item in v:
            if isinstance(item, str):
                result.append(DependencySpec(name=item))
            else:
                result.append(item)
        return result


def load_config(path: Path) -> ChecklistConfig:
    """Load and validate a checklist from a YAML file."""
    with open(path) as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"{path} is not valid YAML: {e}") from e

    if raw is None:
        return ChecklistConfig()
    if not isinstance(raw, dict):
        raise ValueError(f"{path} must contain a mapping, got {type(raw).__name__}")

    return ChecklistConfig(**raw)


def dump_config(config: ChecklistConfig) -> str:
    """Render a checklist as YAML, keeping the port as an env reference."""
    data = config.model_dump(mode="json")
    data["port"] = "${TEST_PORT:-5001}"
    return yaml.safe_dump(data, sort_keys=False)
