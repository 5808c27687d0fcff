from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError, field_validator

from modelgen.core.errors import ShapeValidationError


class Modifier(str, Enum):
    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"


DEFAULT_MODIFIER = Modifier.PROTECTED


class MemberVariable(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    types: List[StrictStr] = Field(..., alias="type", min_length=1)
    modifier: Optional[Modifier] = None

    @field_validator("types")
    @classmethod
    def _dedupe_types(cls, value: List[str]) -> List[str]:
        return list(dict.fromkeys(value))

    @property
    def visibility(self) -> Modifier:
        return self.modifier or DEFAULT_MODIFIER

    @property
    def is_public(self) -> bool:
        return self.visibility is Modifier.PUBLIC


class DataModel(BaseModel):
    """A user-defined entity: a unique name plus ordered, typed member variables."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: StrictStr
    member_variables: Dict[str, MemberVariable] = Field(..., alias="memberVariables")

    def type_references(self):
        """Yield (field_name, type_name) pairs in declaration order."""
        for field_name, variable in self.member_variables.items():
            for type_name in variable.types:
                yield field_name, type_name


def _failure_path(loc) -> str:
    if not loc:
        return "root"
    if loc[0] == "memberVariables" and len(loc) > 1:
        return f"memberVariables.{loc[1]}"
    return str(loc[0])


def data_model_failures(record: Any) -> List[str]:
    """Return the list of offending paths in a raw data model record.

    An empty list means the record is a valid ``DataModel``. A non-object
    record reports the single sentinel ``root``.
    """
    if not isinstance(record, dict):
        return ["root"]
    try:
        DataModel.model_validate(record)
    except ValidationError as e:
        failures: List[str] = []
        for error in e.errors():
            path = _failure_path(error["loc"])
            if path not in failures:
                failures.append(path)
        return failures
    return []


def is_data_model(record: Any) -> bool:
    return len(data_model_failures(record)) == 0


def parse_data_model(record: Any, subject: str = "data model") -> DataModel:
    """Validate a raw record and return the parsed model."""
    failures = data_model_failures(record)
    if failures:
        raise ShapeValidationError(subject, failures)
    return DataModel.model_validate(record)
