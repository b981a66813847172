from pydantic import BaseModel, Field, ValidationError, field_validator
from typing import Optional
import logging, yaml, pathlib

class ConfigError(ValueError):
    pass

def parse_log_level(value: str) -> str:
    name = str(value).upper()
    if not isinstance(logging.getLevelName(name), int):
        raise ValueError(f"unknown log level {value!r}")
    return name

class StyleConfig(BaseModel):
    pass_: str = Field("green", alias="pass", description="Passing overall result")
    failure: str = Field("bold red")
    warning: str = Field("yellow")
    section_header: str = Field("bold cyan")
    output: str = Field("default")
    label: str = Field("default")
    value: str = Field("bold")

    model_config = {"populate_by_name": True}

class ReportConfig(BaseModel):
    stop_on_first_error: bool = Field(False, description="Runner was asked to stop after the first error")
    color: bool = Field(True)
    width: Optional[int] = Field(None, description="Console width; None lets rich detect it")
    log_level: str = Field("WARNING", description="DEBUG, INFO, WARNING, ERROR or CRITICAL")
    styles: StyleConfig = Field(default_factory=StyleConfig)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        return parse_log_level(v)

def load_config(path: Optional[str]) -> ReportConfig:
    if path is None:
        return ReportConfig()
    p = pathlib.Path(path)
    if not p.exists():
        raise ConfigError(f"{path}: no such config file")
    try:
        data = yaml.safe_load(p.read_text()) or {}
        return ReportConfig.model_validate(data)
    except (yaml.YAMLError, ValidationError) as e:
        raise ConfigError(f"{path}: {e}") from e
