"""Error taxonomy for data model compilation.

Every error here is fatal to a compilation run. Validators report problems as
lists of failing field names; everything else raises one of these.
"""
from typing import List, Sequence


class ModelGenError(Exception):
    """Base class for all compilation errors."""


class DuplicateModelError(ModelGenError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Duplicate data model name: {name}")


class DuplicateTypeError(ModelGenError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Duplicate built-in type name: {name}")


class BuiltInNameError(ModelGenError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Data model name {name} is already a built-in type")


class SelfReferenceError(ModelGenError):
    def __init__(self, model: str, field: str):
        self.model = model
        self.field = field
        super().__init__(
            f"{model}.{field}: cannot have a member variable of the same type"
        )


class UnknownTypeError(ModelGenError):
    def __init__(self, type_name: str, model: str, field: str):
        self.type_name = type_name
        self.model = model
        self.field = field
        super().__init__(f"{model}.{field}: {type_name} type does not exist")


class CyclicReferenceError(ModelGenError):
    def __init__(self, cycle: Sequence[str]):
        self.cycle = list(cycle)
        path = " -> ".join(self.cycle + self.cycle[:1])
        super().__init__(f"Cyclic data model reference: {path}")


class ShapeValidationError(ModelGenError):
    """A record or config document does not have the expected shape."""

    def __init__(self, subject: str, failures: List[str]):
        self.subject = subject
        self.failures = list(failures)
        super().__init__(f"Invalid {subject}: {', '.join(self.failures)}")
