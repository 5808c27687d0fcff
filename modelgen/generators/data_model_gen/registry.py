"""Name-indexed registry of user-defined data models."""
from collections.abc import Mapping
from typing import Dict, Iterable, Iterator

from modelgen.core.errors import DuplicateModelError
from modelgen.schemas.data_model import DataModel


class ModelRegistry(Mapping):
    """Read-only mapping of model name to model, in registration order."""

    def __init__(self, models: Dict[str, DataModel]):
        self._models = dict(models)

    @classmethod
    def register(cls, models: Iterable[DataModel]) -> "ModelRegistry":
        """Index models by name, failing on the first repeated name."""
        by_name: Dict[str, DataModel] = {}
        for model in models:
            # If we have a duplicate, we'll just throw.
            if model.name in by_name:
                raise DuplicateModelError(model.name)
            by_name[model.name] = model
        return cls(by_name)

    def __getitem__(self, name: str) -> DataModel:
        return self._models[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._models)

    def __len__(self) -> int:
        return len(self._models)
