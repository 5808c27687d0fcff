"""Orchestrator for data model code generation."""
import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from modelgen.core.config import DataModelGenConfig
from modelgen.core.errors import CyclicReferenceError, ModelGenError, ShapeValidationError
from modelgen.core.workflow import CompileStage
from modelgen.generators.data_model_gen.builtins import TypeUniverse, default_universe
from modelgen.generators.data_model_gen.classifier import classify, find_cycles, structural_errors
from modelgen.generators.data_model_gen.registry import ModelRegistry
from modelgen.generators.data_model_gen.render_model import render_model
from modelgen.generators.data_model_gen.types import GeneratedFile, ModelOutput
from modelgen.generators.data_model_gen.utils import output_filename
from modelgen.generators.data_model_gen.writer import write_files
from modelgen.schemas.data_model import DataModel, parse_data_model

log = logging.getLogger(__name__)

MODEL_FILE_SUFFIX = ".json"


def load_model_file(path: Path) -> List[DataModel]:
    """
    Read data model records from a JSON file.

    A file whose top-level value is not an array contributes no models.

    Raises:
        ShapeValidationError: if the file is not JSON or a record is malformed
    """
    try:
        parsed = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ShapeValidationError(f"JSON in {path}", [f"root ({e.msg})"]) from e
    except UnicodeDecodeError as e:
        raise ShapeValidationError(f"JSON in {path}", ["root (not UTF-8)"]) from e

    if not isinstance(parsed, list):
        log.warning("Skipping %s: top-level value is not an array", path,
                    extra={"stage": str(CompileStage.LOAD)})
        return []

    models = []
    for index, record in enumerate(parsed):
        models.append(parse_data_model(record, f"data model {path}[{index}]"))
    return models


def load_models(in_dir: Path) -> List[DataModel]:
    """Read every `*.json` model file directly inside `in_dir`, by file name."""
    if in_dir.exists() and not in_dir.is_dir():
        raise ShapeValidationError(f"model directory {in_dir}", ["root (not a directory)"])
    models: List[DataModel] = []
    for path in sorted(in_dir.iterdir()):
        if path.is_file() and path.suffix == MODEL_FILE_SUFFIX:
            file_models = load_model_file(path)
            log.info("Loaded %d data models from %s", len(file_models), path.name,
                     extra={"stage": str(CompileStage.LOAD)})
            models.extend(file_models)
    return models


def compile_data_models(
    models: Iterable[DataModel],
    universe: Optional[TypeUniverse] = None,
    allow_cycles: bool = True,
) -> Dict[str, ModelOutput]:
    """
    Compile models into their imports, interface and class text.

    Simple models are emitted before complex ones; the result maps model name
    to its output in that order.
    """
    universe = universe or default_universe()
    registry = ModelRegistry.register(models)
    log.info("Registered %d data models", len(registry), extra={"stage": str(CompileStage.REGISTER)})

    classification = classify(registry, universe, allow_cycles=allow_cycles)

    output: Dict[str, ModelOutput] = {}
    # Create the simple ones first, then the complex ones
    for model in list(classification.simple.values()) + list(classification.complex.values()):
        output[model.name] = render_model(model, classification, universe)
    return output


def check_data_models(
    models: Iterable[DataModel],
    universe: Optional[TypeUniverse] = None,
    allow_cycles: bool = True,
) -> List[ModelGenError]:
    """Every structural problem in the model set, without emitting anything."""
    try:
        registry = ModelRegistry.register(models)
    except ModelGenError as e:
        return [e]
    errors = structural_errors(registry, universe)
    if not allow_cycles:
        errors.extend(CyclicReferenceError(cycle) for cycle in find_cycles(registry))
    return errors


def build_files(outputs: Dict[str, ModelOutput]) -> List[GeneratedFile]:
    return [
        GeneratedFile(path=output_filename(name), content=output.file_contents() + "\n")
        for name, output in outputs.items()
    ]


def generate_data_models(config: DataModelGenConfig) -> List[GeneratedFile]:
    """
    Generate TypeScript modules for every model under the configured input dir.

    Nothing is written unless every model compiles.

    Args:
        config: Validated generator config

    Returns:
        List of GeneratedFile objects
    """
    models = load_models(Path(config.in_dir))
    outputs = compile_data_models(models, allow_cycles=config.allow_cycles)
    files = build_files(outputs)

    write_files(files, Path(config.out_dir))
    return files
