"""Configuration schema for notes2md."""

from __future__ import annotations

from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field


class OutputConfig(BaseModel):
    """Configuration for written files."""

    extension: str = ".md"
    on_collision: Literal["suffix", "skip", "overwrite"] = "suffix"


class FrontmatterConfig(BaseModel):
    """Configuration for rendered front matter."""

    include_metadata: bool = False


class ConversionConfig(BaseModel):
    """Configuration for which notes are converted."""

    include_trashed: bool = True


class Config(BaseModel):
    """Main configuration class for notes2md."""

    output: OutputConfig = Field(default_factory=OutputConfig)
    frontmatter: FrontmatterConfig = Field(default_factory=FrontmatterConfig)
    conversion: ConversionConfig = Field(default_factory=ConversionConfig)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for YAML serialization."""
        return {
            "output": {
                "extension": self.output.extension,
                "on_collision": self.output.on_collision,
            },
            "frontmatter": {
                "include_metadata": self.frontmatter.include_metadata,
            },
            "conversion": {
                "include_trashed": self.conversion.include_trashed,
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Create config from a dictionary, ignoring unknown sections."""
        pydantic_data: dict[str, Any] = {}

        for section in ("output", "frontmatter", "conversion"):
            if isinstance(data.get(section), dict):
                pydantic_data[section] = data[section]

        return cls.model_validate(pydantic_data)

    def to_yaml(self) -> str:
        """Convert config to YAML string."""
        return yaml.safe_dump(self.to_dict(), sort_keys=False, default_flow_style=False)
