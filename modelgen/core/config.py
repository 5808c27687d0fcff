import json
from pathlib import Path
from typing import Any, List, Tuple, Type, Union

from pydantic import Field, StrictBool, StrictStr, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from modelgen.core.errors import ShapeValidationError

CONFIG_PATH = Path("data_model_gen.json")


class DataModelGenConfig(BaseSettings):
    model_config = SettingsConfigDict(
        extra="ignore",
        populate_by_name=True,
    )

    out_dir: StrictStr = Field(alias="outDir")
    in_dir: StrictStr = Field(alias="inDir")
    allow_cycles: StrictBool = Field(default=True, alias="allowCycles")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        # Values come from the config file only, never the environment.
        return (init_settings,)


def validation_failures(exc: ValidationError) -> List[str]:
    """Flatten pydantic error locations into dotted field paths, in order."""
    failures: List[str] = []
    for error in exc.errors():
        path = ".".join(str(part) for part in error["loc"]) or "root"
        if path not in failures:
            failures.append(path)
    return failures


def parse_config(data: Any) -> DataModelGenConfig:
    if not isinstance(data, dict):
        raise ShapeValidationError("config", ["root"])
    try:
        return DataModelGenConfig(**data)
    except ValidationError as e:
        raise ShapeValidationError("config", validation_failures(e)) from e


def load_config(path: Union[str, Path] = CONFIG_PATH) -> DataModelGenConfig:
    """Read and validate the generator config file."""
    config_path = Path(path)
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ShapeValidationError(f"config {config_path}", [f"root ({e.msg})"]) from e
    except UnicodeDecodeError as e:
        raise ShapeValidationError(f"config {config_path}", ["root (not UTF-8)"]) from e
    return parse_config(data)
