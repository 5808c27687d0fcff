"""Compile data model definitions into TypeScript modules."""
from modelgen.generators.data_model_gen.generator import (
    check_data_models,
    compile_data_models,
    generate_data_models,
    load_model_file,
    load_models,
)

__all__ = [
    "check_data_models",
    "compile_data_models",
    "generate_data_models",
    "load_model_file",
    "load_models",
]
