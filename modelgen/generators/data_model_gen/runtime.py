"""Host-side rendition of the generated class contract.

``record_failures`` applies the same rules as the emitted ``isDataModelTest``
to JSON-decoded Python values, using the host predicates of the type universe.
``Record`` mirrors the emitted ``toJSON`` / ``fromJSON`` pair.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from modelgen.core.errors import ShapeValidationError, UnknownTypeError
from modelgen.generators.data_model_gen.builtins import MISSING, TypeUniverse, default_universe
from modelgen.generators.data_model_gen.render_model import ROOT_FAILURE
from modelgen.generators.data_model_gen.types import Classification
from modelgen.schemas.data_model import DataModel


@dataclass(frozen=True)
class Compilation:
    """What host validation needs to resolve type names."""
    classification: Classification
    universe: TypeUniverse

    @classmethod
    def of(cls, classification: Classification, universe: Optional[TypeUniverse] = None) -> "Compilation":
        return cls(classification, universe or default_universe())

    def model(self, name: str) -> Optional[DataModel]:
        return self.classification.all_models.get(name)


def accepts(type_name: str, value: Any, owner: DataModel, field_name: str, compilation: Compilation) -> bool:
    """Whether a single union alternative accepts the value."""
    referenced = compilation.model(type_name)
    if referenced is not None:
        return not record_failures(referenced, value, compilation)
    builtin = compilation.universe.get(type_name)
    if builtin is None:
        raise UnknownTypeError(type_name, owner.name, field_name)
    return builtin.predicate(value)


def record_failures(model: DataModel, value: Any, compilation: Compilation) -> List[str]:
    """Names of the fields whose value matches none of their declared types."""
    if not compilation.universe.generic_object.predicate(value):
        return [ROOT_FAILURE]

    failures: List[str] = []
    for field_name, variable in model.member_variables.items():
        field_value = value.get(field_name, MISSING)
        if not any(
            accepts(type_name, field_value, model, field_name, compilation)
            for type_name in variable.types
        ):
            failures.append(field_name)
    return failures


def is_record(model: DataModel, value: Any, compilation: Compilation) -> bool:
    return len(record_failures(model, value, compilation)) == 0


class Record:
    """An instance of a compiled model holding its field values."""

    def __init__(self, model: DataModel, *values: Any):
        if len(values) != len(model.member_variables):
            raise TypeError(
                f"{model.name} takes {len(model.member_variables)} values, got {len(values)}"
            )
        self._model = model
        self._values: Dict[str, Any] = dict(zip(model.member_variables, values))

    @property
    def model(self) -> DataModel:
        return self._model

    def __getattr__(self, name: str) -> Any:
        values = self.__dict__.get("_values", {})
        if name in values:
            return values[name]
        raise AttributeError(name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return self._model.name == other._model.name and self.to_json() == other.to_json()

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self._values.items())
        return f"{self._model.name}({fields})"

    def to_json(self) -> Dict[str, Any]:
        output: Dict[str, Any] = {}
        for name, value in self._values.items():
            if value is MISSING:
                continue
            output[name] = value.to_json() if isinstance(value, Record) else value
        return output

    @classmethod
    def from_json(cls, model: DataModel, data: Any, compilation: Compilation) -> "Record":
        """Validate the input, then bind its fields positionally."""
        failures = record_failures(model, data, compilation)
        if failures:
            raise ShapeValidationError(model.name, failures)
        return cls(model, *(data.get(name, MISSING) for name in model.member_variables))
