"""Model-specific rendering functions for TypeScript generation."""
import logging
from typing import List, Optional

from modelgen.core.errors import UnknownTypeError
from modelgen.core.workflow import CompileStage
from modelgen.generators.data_model_gen.builtins import TypeUniverse, default_universe
from modelgen.generators.data_model_gen.document import Block, SourceDocument
from modelgen.generators.data_model_gen.types import Classification, ModelOutput
from modelgen.generators.data_model_gen.utils import (
    backing_field_name,
    json_interface_name,
    module_specifier,
    union_type,
)
from modelgen.schemas.data_model import DataModel

log = logging.getLogger(__name__)

ROOT_FAILURE = "root"


def render_imports(model: DataModel, classification: Classification) -> str:
    """Import every referenced model; simple models import nothing."""
    if not classification.is_complex(model.name):
        return ""

    doc = SourceDocument()
    for _, type_name in model.type_references():
        if classification.is_model(type_name):
            doc.line(f"import {{ {type_name} }} from '{module_specifier(type_name)}';")
    return doc.render()


def render_interface(model: DataModel) -> str:
    """Generate the JSON-shape interface for a model."""
    doc = SourceDocument()
    with doc.block(f"export interface {json_interface_name(model.name)} {{", "}") as body:
        for name, variable in model.member_variables.items():
            body.line(f"{name}: {union_type(variable)};")
    return doc.render()


def _render_constructor(cls: Block, model: DataModel) -> None:
    with cls.block("constructor(", ") {}") as params:
        for name, variable in model.member_variables.items():
            params.line(
                f"{variable.visibility.value} {backing_field_name(name, variable)}: {union_type(variable)},"
            )


def _render_getters(cls: Block, model: DataModel) -> None:
    for name, variable in model.member_variables.items():
        if variable.is_public:
            continue
        cls.line("")
        with cls.block(f"get {name}(): {union_type(variable)} {{", "}") as body:
            body.line(f"return this.{backing_field_name(name, variable)};")


def _render_to_json(cls: Block, model: DataModel) -> None:
    with cls.block(f"toJSON(): {json_interface_name(model.name)} {{", "}") as body:
        with body.block("return {", "};") as literal:
            for name in model.member_variables:
                literal.line(f"{name}: this.{name},")


def _render_from_json(cls: Block, model: DataModel) -> None:
    header = f"static fromJSON(input: {json_interface_name(model.name)}): {model.name} {{"
    with cls.block(header, "}") as body:
        with body.block(f"if (!{model.name}.isDataModel(input)) {{", "}") as guard:
            guard.line(
                f"throw new Error(`not a data model: ${{{model.name}.isDataModelTest(input)}}`);"
            )
        with body.block(f"return new {model.name}(", ");") as args:
            for name in model.member_variables:
                args.line(f"input.{name},")


def _render_is_data_model(cls: Block, model: DataModel) -> None:
    with cls.block(f"static isDataModel(input: unknown): input is {model.name} {{", "}") as body:
        body.line(f"return {model.name}.isDataModelTest(input).length === 0;")


def rejection_check(
    type_name: str,
    field_name: str,
    model_name: str,
    classification: Classification,
    universe: TypeUniverse,
) -> str:
    """Expression that is true when `input.<field>` is NOT of type `type_name`."""
    value = f"input.{field_name}"
    if classification.is_model(type_name):
        return f"{type_name}.isDataModelTest({value}).length !== 0"
    builtin = universe.get(type_name)
    if builtin is None:
        raise UnknownTypeError(type_name, model_name, field_name)
    return f"!({builtin.predicate_source})({value})"


def _render_is_data_model_test(
    cls: Block,
    model: DataModel,
    classification: Classification,
    universe: TypeUniverse,
) -> None:
    with cls.block("static isDataModelTest(input: unknown): string[] {", "}") as body:
        with body.block(f"if (!({universe.generic_object.predicate_source})(input)) {{", "}") as guard:
            guard.line(f"return ['{ROOT_FAILURE}'];")
        body.line("const output: string[] = [];")

        # A field fails only when every alternative in its union rejects the value.
        for name, variable in model.member_variables.items():
            checks: List[str] = [
                rejection_check(type_name, name, model.name, classification, universe)
                for type_name in variable.types
            ]
            with body.block("if (", ") {") as condition:
                for index, check in enumerate(checks):
                    suffix = " &&" if index < len(checks) - 1 else ""
                    condition.line(f"{check}{suffix}")
            with body.block(None, "}") as push:
                push.line(f"output.push('{name}');")

        body.line("return output;")


def render_class(
    model: DataModel,
    classification: Classification,
    universe: Optional[TypeUniverse] = None,
) -> str:
    """Generate the runtime-checked class for a model."""
    universe = universe or default_universe()
    doc = SourceDocument()

    with doc.block(f"export class {model.name} {{", "}") as cls:
        _render_constructor(cls, model)
        _render_getters(cls, model)
        cls.line("")
        _render_to_json(cls, model)
        cls.line("")
        _render_from_json(cls, model)
        cls.line("")
        _render_is_data_model(cls, model)
        cls.line("")
        _render_is_data_model_test(cls, model, classification, universe)

    return doc.render()


def render_model(
    model: DataModel,
    classification: Classification,
    universe: Optional[TypeUniverse] = None,
) -> ModelOutput:
    """Emit imports, interface and class text for one classified model."""
    log.debug("Rendering data model", extra={"model": model.name, "stage": str(CompileStage.EMIT)})
    return ModelOutput(
        imports=render_imports(model, classification),
        interface=render_interface(model),
        class_text=render_class(model, classification, universe),
    )
