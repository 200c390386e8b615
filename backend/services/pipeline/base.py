"""Base class for the screening pipeline stages.

A stage is a pure transformation over a set of lookup tables (skill terms,
snippet rules). Tables are assembled once, on first use, and then shared by
every call, including calls from the orchestrator's pool threads.
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Any

logger = logging.getLogger(__name__)


class BaseStageService(ABC):
    """Base class for pipeline stage services.

    Subclasses implement:
        - stage_name: identifier used in stage_registry
        - predict(**kwargs): run the stage and return its typed schema
        - build_tables(): only stages that read lookup tables; stateless
          stages keep the default
    """

    stage_name: str = ""

    def __init__(self) -> None:
        self._tables: Any = None
        self._ready = False
        self._lock = threading.Lock()

    @abstractmethod
    def predict(self, **kwargs: Any) -> Any:
        """Run the stage. Returns a Pydantic schema defined per stage."""

    def build_tables(self) -> Any:
        """Assemble the tables predict() reads. Called once."""
        return None

    @property
    def is_ready(self) -> bool:
        return self._ready

    @property
    def tables(self) -> Any:
        if not self._ready:
            self.warm_up()
        return self._tables

    def warm_up(self) -> None:
        """Build the stage's tables if that has not happened yet."""
        if self._ready:
            return
        with self._lock:
            if self._ready:
                return
            self._tables = self.build_tables()
            self._ready = True
        logger.info("Stage ready: %s", self.stage_name)
