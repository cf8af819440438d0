from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from dep11gen.errors import ConfigError
from dep11gen.model.component import CHECKLIST


class Inputs(BaseModel):
    path: Union[str, list[str]]

    def get_files(self, extensions: tuple[str, ...] = ("xml",)) -> list[Path]:
        paths = [self.path] if isinstance(self.path, str) else self.path
        files = []

        for p in paths:
            p = Path(p)

            if p.is_file():
                files.append(p)
            elif p.is_dir():
                files.extend(sorted(f for f in p.rglob("*") if f.is_file() and f.suffix.lstrip(".").lower() in extensions)) # recursive search across multiple levels
        return files


class OutputConfig(BaseModel):
    output_dir: str = "./output"
    extension: str = "yml"


class CompletionConfig(BaseModel):
    interactive: bool = False
    defaults: dict[str, Union[str, list[str]]] = Field(default_factory=dict)
    max_prompts: Optional[int] = Field(default=None, ge=0)

    @field_validator("defaults")
    @classmethod
    def check_defaults(cls, v):
        unknown = set(v) - set(CHECKLIST)
        if unknown:
            raise ValueError(f"Unknown checklist entries: {sorted(unknown)}. Allowed: {list(CHECKLIST)}")
        return v


class PipelineConfig(BaseModel):
    inputs: Inputs
    output: OutputConfig = Field(default_factory=OutputConfig)
    completion: CompletionConfig = Field(default_factory=CompletionConfig)
    batch_size: int = Field(default=16, gt=0)
    log_level: str = "INFO"
    log_file: Optional[str] = None
    debug: bool = False

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v):
        allowed = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Unsupported log level: {v}. Allowed: {allowed}")
        return v.upper()


def load_config(path: Union[str, Path]) -> PipelineConfig:
    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(raw, dict) or "pipeline" not in raw:
        raise ConfigError(f"{path} has no top-level `pipeline` section")
    try:
        return PipelineConfig(**raw["pipeline"])  # unpack
    except ValidationError as e:
        raise ConfigError(f"Invalid config {path}: {e}") from e
