"""Persist generated modules under the configured output directory."""
import logging
from pathlib import Path
from typing import List

from modelgen.core.workflow import CompileStage
from modelgen.generators.data_model_gen.types import GeneratedFile

log = logging.getLogger(__name__)


def write_files(files: List[GeneratedFile], out_dir: Path) -> None:
    """Write each generated module to `out_dir`, replacing older output of the same name."""
    out_dir.mkdir(parents=True, exist_ok=True)

    for generated in files:
        target = out_dir / generated.path
        target.write_text(generated.content, encoding="utf-8")
        log.info("Wrote %s", target.name, extra={"model": target.name.split(".", 1)[0],
                                                  "stage": str(CompileStage.WRITE)})
