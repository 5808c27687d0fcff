"""Naming conventions shared by the emitter and the writer."""
from modelgen.schemas.data_model import MemberVariable

GENERATED_SUFFIX = ".g"
GENERATED_EXTENSION = "ts"
BACKING_FIELD_PREFIX = "_"


def json_interface_name(model_name: str) -> str:
    """Name of the JSON-shape interface emitted for a model."""
    return f"{model_name}JSON"


def backing_field_name(field_name: str, variable: MemberVariable) -> str:
    """Constructor parameter name: the field itself when public, else prefixed."""
    if variable.is_public:
        return field_name
    return f"{BACKING_FIELD_PREFIX}{field_name}"


def module_specifier(model_name: str) -> str:
    """Relative import specifier of a sibling generated module."""
    return f"./{model_name}{GENERATED_SUFFIX}"


def output_filename(model_name: str) -> str:
    return f"{model_name}{GENERATED_SUFFIX}.{GENERATED_EXTENSION}"


def union_type(variable: MemberVariable) -> str:
    return " | ".join(variable.types)
