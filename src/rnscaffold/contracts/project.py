"""Project initializer contracts."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class InitOptions(BaseModel):
    """Options bag parsed from ``init`` arguments."""

    name: str
    template: str | None = None
    npm: bool = False
    verbose: bool = False
    extra: tuple[str, ...] = ()

    model_config = {"frozen": True}


class ProjectDescriptor(BaseModel):
    destination: Path
    name: str = Field(min_length=1)
    template: str | None = None

    model_config = {"frozen": True}
