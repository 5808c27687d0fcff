"""Tests for model registration and simple/complex classification."""
import logging

import pytest

from modelgen.core.errors import (
    BuiltInNameError,
    CyclicReferenceError,
    DuplicateModelError,
    SelfReferenceError,
    UnknownTypeError,
)
from modelgen.generators.data_model_gen.classifier import classify, find_cycles, structural_errors
from modelgen.generators.data_model_gen.registry import ModelRegistry
from modelgen.schemas.data_model import DataModel


def make_model(name, **fields):
    """Build a model from field name -> list of type names."""
    return DataModel.model_validate({
        "name": name,
        "memberVariables": {field: {"type": types} for field, types in fields.items()},
    })


POINT = make_model("Point", x=["number"], y=["number"])
WRAPPER = make_model("Wrapper", inner=["Point"])


class TestModelRegistry:
    """Test registry construction."""

    def test_register_indexes_by_name_in_order(self):
        registry = ModelRegistry.register([POINT, WRAPPER])
        assert list(registry) == ["Point", "Wrapper"]
        assert registry["Wrapper"] is WRAPPER
        assert "Point" in registry
        assert len(registry) == 2

    def test_duplicate_name_fails(self):
        other_point = make_model("Point", z=["string"])
        with pytest.raises(DuplicateModelError) as exc_info:
            ModelRegistry.register([POINT, WRAPPER, other_point])
        assert exc_info.value.name == "Point"
        assert "Point" in str(exc_info.value)


class TestClassify:
    """Test the simple/complex partition."""

    def test_builtin_only_model_is_simple(self):
        result = classify(ModelRegistry.register([POINT]))
        assert list(result.simple) == ["Point"]
        assert result.complex == {}

    def test_model_reference_makes_complex(self):
        result = classify(ModelRegistry.register([WRAPPER, POINT]))
        assert list(result.simple) == ["Point"]
        assert list(result.complex) == ["Wrapper"]
        assert result.is_complex("Wrapper")
        assert result.is_model("Point")
        assert list(result.all_models) == ["Point", "Wrapper"]

    def test_mixed_union_is_complex(self):
        maybe = make_model("Maybe", value=["null", "Point"], tags=["Array"])
        result = classify(ModelRegistry.register([POINT, maybe]))
        assert "Maybe" in result.complex

    def test_every_builtin_is_accepted(self):
        everything = make_model(
            "Everything",
            a=["string", "String"],
            b=["number", "Number", "BigInt"],
            c=["boolean", "Boolean"],
            d=["Symbol", "null", "undefined"],
            e=["Date", "Set", "Array", "Object"],
        )
        result = classify(ModelRegistry.register([everything]))
        assert "Everything" in result.simple

    def test_self_reference_fails(self):
        node = make_model("Node", value=["number"], next=["Node"])
        with pytest.raises(SelfReferenceError) as exc_info:
            classify(ModelRegistry.register([node]))
        assert exc_info.value.model == "Node"
        assert exc_info.value.field == "next"

    def test_self_reference_in_union_fails(self):
        node = make_model("Node", next=["null", "Node"])
        with pytest.raises(SelfReferenceError):
            classify(ModelRegistry.register([node]))

    def test_unknown_type_fails(self):
        broken = make_model("Broken", thing=["Missing"])
        with pytest.raises(UnknownTypeError) as exc_info:
            classify(ModelRegistry.register([POINT, broken]))
        error = exc_info.value
        assert (error.type_name, error.model, error.field) == ("Missing", "Broken", "thing")

    def test_model_named_after_builtin_fails(self):
        shadow = make_model("Date", y=["number"])
        event = make_model("Event", at=["Date"])
        with pytest.raises(BuiltInNameError) as exc_info:
            classify(ModelRegistry.register([shadow, event]))
        assert exc_info.value.name == "Date"

    @pytest.mark.parametrize("name", ["string", "Object", "undefined"])
    def test_scalar_and_object_names_are_reserved(self, name):
        with pytest.raises(BuiltInNameError):
            classify(ModelRegistry.register([make_model(name, x=["number"])]))

    def test_first_error_in_registry_order_wins(self):
        broken = make_model("Broken", thing=["Missing"])
        node = make_model("Node", next=["Node"])
        with pytest.raises(UnknownTypeError):
            classify(ModelRegistry.register([broken, node]))


class TestStructuralErrors:
    """Test collecting every structural error in one pass."""

    def test_collects_all_errors(self):
        broken = make_model("Broken", a=["Missing"], b=["AlsoMissing", "Broken"])
        node = make_model("Node", next=["Node"])
        errors = structural_errors(ModelRegistry.register([broken, POINT, node]))

        assert [type(e) for e in errors] == [
            UnknownTypeError,
            UnknownTypeError,
            SelfReferenceError,
            SelfReferenceError,
        ]
        assert errors[1].type_name == "AlsoMissing"
        assert errors[3].model == "Node"

    def test_builtin_name_is_reported_with_field_errors(self):
        shadow = make_model("Set", items=["Missing"])
        errors = structural_errors(ModelRegistry.register([shadow]))
        assert [type(e) for e in errors] == [BuiltInNameError, UnknownTypeError]

    def test_clean_registry_has_no_errors(self):
        assert structural_errors(ModelRegistry.register([POINT, WRAPPER])) == []


class TestCycles:
    """Test detection of reference cycles through distinct models."""

    def _pair(self):
        return [make_model("B", a=["A"]), make_model("A", b=["B", "null"])]

    def test_find_two_model_cycle(self):
        assert find_cycles(ModelRegistry.register(self._pair())) == [["A", "B"]]

    def test_find_three_model_cycle_once(self):
        models = [
            make_model("C", a=["A"]),
            make_model("A", b=["B"]),
            make_model("B", c=["C"]),
        ]
        assert find_cycles(ModelRegistry.register(models)) == [["A", "B", "C"]]

    def test_acyclic_graph(self):
        assert find_cycles(ModelRegistry.register([POINT, WRAPPER])) == []

    def test_cycles_allowed_by_default_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING):
            result = classify(ModelRegistry.register(self._pair()))
        assert set(result.complex) == {"A", "B"}
        assert "A -> B -> A" in caplog.text

    def test_cycles_rejected_when_disallowed(self):
        with pytest.raises(CyclicReferenceError) as exc_info:
            classify(ModelRegistry.register(self._pair()), allow_cycles=False)
        assert exc_info.value.cycle == ["A", "B"]
        assert "A -> B -> A" in str(exc_info.value)
