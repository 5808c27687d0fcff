"""Classify models as simple or complex and reject illegal references.

A model is *simple* when every member type is a built-in, and *complex* when at
least one member type names another model. A model taking a built-in type name,
a model naming itself, or a type that exists nowhere is a structural error.
"""
import logging
from typing import Dict, List, Optional

from modelgen.core.errors import (
    BuiltInNameError,
    CyclicReferenceError,
    ModelGenError,
    SelfReferenceError,
    UnknownTypeError,
)
from modelgen.core.workflow import CompileStage
from modelgen.generators.data_model_gen.builtins import TypeUniverse, default_universe
from modelgen.generators.data_model_gen.registry import ModelRegistry
from modelgen.generators.data_model_gen.types import Classification

log = logging.getLogger(__name__)


def _walk(registry: ModelRegistry, universe: TypeUniverse, errors: List[ModelGenError]) -> Classification:
    classification = Classification()

    for model in registry.values():
        if universe.is_builtin(model.name):
            errors.append(BuiltInNameError(model.name))
        complex_model = False

        for field_name, type_name in model.type_references():
            if universe.is_builtin(type_name):
                continue
            if type_name in registry:
                if type_name == model.name:
                    errors.append(SelfReferenceError(model.name, field_name))
                else:
                    complex_model = True
            else:
                errors.append(UnknownTypeError(type_name, model.name, field_name))

        if complex_model:
            classification.complex[model.name] = model
        else:
            classification.simple[model.name] = model

    return classification


def structural_errors(registry: ModelRegistry, universe: Optional[TypeUniverse] = None) -> List[ModelGenError]:
    """Every built-in name clash, self-reference and unknown-type error, in walk order."""
    errors: List[ModelGenError] = []
    _walk(registry, universe or default_universe(), errors)
    return errors


def find_cycles(registry: ModelRegistry) -> List[List[str]]:
    """Reference cycles through two or more distinct models.

    Each cycle is reported once, rotated to start at its smallest name.
    """
    edges: Dict[str, List[str]] = {}
    for model in registry.values():
        targets = []
        for _, type_name in model.type_references():
            if type_name in registry and type_name != model.name and type_name not in targets:
                targets.append(type_name)
        edges[model.name] = targets

    cycles: List[List[str]] = []

    # Only walk through names greater than the start so each cycle is found
    # exactly once, from its smallest member.
    def visit(start: str, node: str, path: List[str]) -> None:
        for target in edges[node]:
            if target == start:
                if len(path) > 1:
                    cycles.append(path)
            elif target not in path and target > start:
                visit(start, target, path + [target])

    for name in sorted(edges):
        visit(name, name, [name])

    return cycles


def classify(
    registry: ModelRegistry,
    universe: Optional[TypeUniverse] = None,
    allow_cycles: bool = True,
) -> Classification:
    """Partition registered models into simple and complex.

    Raises the first structural error found in registry order.
    """
    errors: List[ModelGenError] = []
    classification = _walk(registry, universe or default_universe(), errors)
    if errors:
        raise errors[0]

    for cycle in find_cycles(registry):
        if not allow_cycles:
            raise CyclicReferenceError(cycle)
        log.warning(
            "Cyclic model reference: %s",
            " -> ".join(cycle + cycle[:1]),
            extra={"stage": str(CompileStage.CLASSIFY)},
        )

    log.info(
        "Classified %d simple and %d complex data models",
        len(classification.simple),
        len(classification.complex),
        extra={"stage": str(CompileStage.CLASSIFY)},
    )
    log.debug("Complex data models: %s", list(classification.complex), extra={"stage": str(CompileStage.CLASSIFY)})
    return classification
