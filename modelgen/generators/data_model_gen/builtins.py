"""Built-in type catalogs: the scalar and object types a member may reference.

Each entry pairs a host predicate, applied to JSON-decoded Python values, with
the TypeScript type guard emitted into generated validators. Boxed primitives,
``BigInt`` and ``Symbol`` have no JSON form, so their host predicates never
match. ``undefined`` is modelled by the ``MISSING`` sentinel for absent keys.
"""
from datetime import date
from functools import lru_cache
from typing import Any, Dict, Iterable, Iterator, Optional

from modelgen.core.errors import DuplicateTypeError
from modelgen.generators.data_model_gen.types import BuiltInType, TypeKind


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()

GENERIC_OBJECT = "Object"


def _never(value: Any) -> bool:
    return False


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_object(value: Any) -> bool:
    return isinstance(value, dict)


class TypeCatalog:
    """Name-indexed catalog of built-in types; rejects duplicate names."""

    def __init__(self, kind: TypeKind, types: Iterable[BuiltInType] = ()):
        self.kind = kind
        self._types: Dict[str, BuiltInType] = {}
        for builtin in types:
            self.register(builtin)

    def register(self, builtin: BuiltInType) -> None:
        if builtin.name in self._types:
            raise DuplicateTypeError(builtin.name)
        self._types[builtin.name] = builtin

    def get(self, name: str) -> Optional[BuiltInType]:
        return self._types.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __iter__(self) -> Iterator[BuiltInType]:
        return iter(self._types.values())

    def __len__(self) -> int:
        return len(self._types)


class TypeUniverse:
    """Scalar and object catalogs behind a single O(1) resolver."""

    def __init__(self, scalars: TypeCatalog, objects: TypeCatalog):
        for builtin in objects:
            if builtin.name in scalars:
                raise DuplicateTypeError(builtin.name)
        self.scalars = scalars
        self.objects = objects

    def resolve(self, name: str) -> TypeKind:
        if name in self.scalars:
            return TypeKind.SCALAR
        if name in self.objects:
            return TypeKind.OBJECT
        return TypeKind.UNKNOWN

    def get(self, name: str) -> Optional[BuiltInType]:
        return self.scalars.get(name) or self.objects.get(name)

    def is_builtin(self, name: str) -> bool:
        return self.resolve(name) is not TypeKind.UNKNOWN

    @property
    def generic_object(self) -> BuiltInType:
        return self.objects.get(GENERIC_OBJECT)


SCALAR_TYPES = [
    BuiltInType(
        name="string",
        predicate=lambda value: isinstance(value, str),
        predicate_source="(input: unknown): input is string => typeof input === 'string'",
    ),
    BuiltInType(
        name="String",
        predicate=_never,
        predicate_source="(input: unknown): input is String => input instanceof String",
    ),
    BuiltInType(
        name="number",
        predicate=_is_number,
        predicate_source="(input: unknown): input is number => typeof input === 'number'",
    ),
    BuiltInType(
        name="Number",
        predicate=_never,
        predicate_source="(input: unknown): input is Number => input instanceof Number",
    ),
    BuiltInType(
        name="boolean",
        predicate=lambda value: isinstance(value, bool),
        predicate_source="(input: unknown): input is boolean => typeof input === 'boolean'",
    ),
    BuiltInType(
        name="Boolean",
        predicate=_never,
        predicate_source="(input: unknown): input is Boolean => input instanceof Boolean",
    ),
    BuiltInType(
        name="BigInt",
        predicate=_never,
        predicate_source="(input: unknown): input is bigint => typeof input === 'bigint'",
    ),
    BuiltInType(
        name="Symbol",
        predicate=_never,
        predicate_source="(input: unknown): input is symbol => typeof input === 'symbol'",
    ),
    BuiltInType(
        name="null",
        predicate=lambda value: value is None,
        predicate_source="(input: unknown): input is null => input === null",
    ),
    BuiltInType(
        name="undefined",
        predicate=lambda value: value is MISSING,
        predicate_source="(input: unknown): input is undefined => input === undefined",
    ),
]

OBJECT_TYPES = [
    BuiltInType(
        name="Date",
        predicate=lambda value: isinstance(value, date),
        predicate_source="(input: unknown): input is Date => input instanceof Date",
    ),
    BuiltInType(
        name="Set",
        predicate=lambda value: isinstance(value, (set, frozenset)),
        predicate_source="(input: unknown): input is Set<unknown> => input instanceof Set",
    ),
    BuiltInType(
        name="Array",
        predicate=lambda value: isinstance(value, (list, tuple)),
        predicate_source="(input: unknown): input is Array<unknown> => Array.isArray(input)",
    ),
    BuiltInType(
        name=GENERIC_OBJECT,
        predicate=_is_object,
        predicate_source=(
            "(input: unknown): input is Record<string, unknown> => "
            "!!input && typeof input === 'object' && !Array.isArray(input)"
        ),
    ),
]


@lru_cache(maxsize=None)
def default_universe() -> TypeUniverse:
    """The process-wide built-in type universe, built once."""
    return TypeUniverse(
        TypeCatalog(TypeKind.SCALAR, SCALAR_TYPES),
        TypeCatalog(TypeKind.OBJECT, OBJECT_TYPES),
    )
