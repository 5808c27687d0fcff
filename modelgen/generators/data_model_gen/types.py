"""Dataclasses for data model generation."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict

from modelgen.schemas.data_model import DataModel


class TypeKind(str, Enum):
    SCALAR = "scalar"
    OBJECT = "object"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class BuiltInType:
    """A built-in type: host predicate plus its TypeScript type guard source."""
    name: str
    predicate: Callable[[Any], bool]
    predicate_source: str  # Spliced into generated code as `(<source>)(value)`


@dataclass
class Classification:
    """Models partitioned by whether they reference another model."""
    simple: Dict[str, DataModel] = field(default_factory=dict)
    complex: Dict[str, DataModel] = field(default_factory=dict)

    @property
    def all_models(self) -> Dict[str, DataModel]:
        return {**self.simple, **self.complex}

    def is_complex(self, name: str) -> bool:
        return name in self.complex

    def is_model(self, name: str) -> bool:
        return name in self.simple or name in self.complex


@dataclass(frozen=True)
class ModelOutput:
    """The three text artifacts emitted for one model."""
    imports: str
    interface: str
    class_text: str

    def file_contents(self) -> str:
        parts = [part for part in (self.imports, self.interface, self.class_text) if part]
        return "\n\n".join(parts)


@dataclass
class GeneratedFile:
    """Represents a generated file."""
    path: str  # Relative path from output directory
    content: str  # File contents
