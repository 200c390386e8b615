"""Stage registry for the screening pipeline.

One shared instance per stage name. Stage classes are imported on first
request; ``install`` swaps in a differently configured instance, e.g. an
extractor built with an extended skill vocabulary.
"""

import importlib
import logging
import threading

from services.pipeline.base import BaseStageService

logger = logging.getLogger(__name__)

# stage name -> "module:ClassName"
STAGES: dict[str, str] = {
    "requirement_extractor": "services.pipeline.requirement_extractor:RequirementExtractorService",
    "resume_extractor": "services.pipeline.resume_extractor:ResumeExtractorService",
    "dimension_scorer": "services.pipeline.dimension_scorer:DimensionScorerService",
    "aggregator": "services.pipeline.aggregator:AggregatorService",
}
STAGE_NAMES = tuple(STAGES)

_registry: dict[str, BaseStageService] = {}
_registry_lock = threading.Lock()


def _check_name(name: str) -> None:
    if name not in STAGES:
        raise ValueError(f"Unknown stage: {name}")


def _create_stage(name: str) -> BaseStageService:
    module_name, class_name = STAGES[name].split(":")
    stage_cls = getattr(importlib.import_module(module_name), class_name)
    return stage_cls()


def get_stage(name: str) -> BaseStageService:
    """Shared stage instance for ``name``, with its tables built."""
    _check_name(name)
    with _registry_lock:
        svc = _registry.get(name)
        if svc is None:
            svc = _registry[name] = _create_stage(name)
    svc.warm_up()
    return svc


def install(name: str, stage: BaseStageService) -> None:
    """Replace the shared instance for ``name``."""
    _check_name(name)
    if stage.stage_name != name:
        raise ValueError(f"Stage {stage.stage_name!r} cannot be installed as {name!r}")
    with _registry_lock:
        _registry[name] = stage
    logger.info("Installed stage: %s (%s)", name, type(stage).__name__)


def preload(*names: str) -> None:
    """Build stages ahead of the first request. All stages when none are named."""
    for name in names or STAGE_NAMES:
        get_stage(name)


def clear() -> None:
    """Drop all stage instances. Useful for testing."""
    with _registry_lock:
        _registry.clear()
