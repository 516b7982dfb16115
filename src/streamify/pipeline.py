"""Request pipeline: an ordered, configuration-driven list of stages.

Each stage installs one concern on the FastAPI app (a middleware, a group of
routes, or exception handlers). Stages may carry a condition evaluated once
against the settings at assembly time; disabled stages are skipped entirely.

Starlette wraps the most recently added middleware outermost, so middleware
stages are installed in reverse to keep the declared order on the way in.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional, Tuple

from fastapi import FastAPI
from loguru import logger

from .config import Settings
from .context import AppContext
from .core.exceptions import PipelineError


class StageKind(str, Enum):
    MIDDLEWARE = "middleware"
    ROUTES = "routes"
    HANDLER = "handler"


Installer = Callable[[FastAPI, AppContext], None]
Condition = Callable[[Settings], bool]


@dataclass(frozen=True)
class PipelineStage:
    name: str
    kind: StageKind
    install: Installer
    condition: Optional[Condition] = None

    def enabled(self, settings: Settings) -> bool:
        return self.condition is None or bool(self.condition(settings))


class RequestPipeline:
    """Validated stage order, installed once per application."""

    def __init__(self, stages: Iterable[PipelineStage]):
        self.stages: Tuple[PipelineStage, ...] = tuple(stages)
        self._validate()

    def _validate(self) -> None:
        if not self.stages:
            raise PipelineError("Request pipeline has no stages")

        names = [stage.name for stage in self.stages]
        duplicates = {n for n in names if names.count(n) > 1}
        if duplicates:
            raise PipelineError(f"Duplicate pipeline stages: {sorted(duplicates)}")

        seen_routes = False
        for stage in self.stages:
            if stage.kind is StageKind.ROUTES:
                seen_routes = True
            elif stage.kind is StageKind.MIDDLEWARE and seen_routes:
                raise PipelineError(f"Middleware stage '{stage.name}' must precede route dispatch")

        last = self.stages[-1]
        if last.kind is not StageKind.HANDLER or last.condition is not None:
            raise PipelineError("The last stage must be the unconditional error handler")

    @property
    def names(self) -> List[str]:
        return [stage.name for stage in self.stages]

    def active(self, settings: Settings) -> List[PipelineStage]:
        """Stages enabled for these settings, in declared order."""
        return [stage for stage in self.stages if stage.enabled(settings)]

    def assemble(self, app: FastAPI, context: AppContext) -> List[str]:
        """Install enabled stages on `app`.

        Returns:
            Names of the installed stages

        Raises:
            PipelineError: The app already has a pipeline
        """
        if getattr(app.state, "pipeline", None) is not None:
            raise PipelineError("Request pipeline already assembled for this application")

        active = self.active(context.settings)
        middleware = [stage for stage in active if stage.kind is StageKind.MIDDLEWARE]
        for stage in reversed(middleware):
            stage.install(app, context)
        for stage in active:
            if stage.kind is not StageKind.MIDDLEWARE:
                stage.install(app, context)

        installed = [stage.name for stage in active]
        skipped = [name for name in self.names if name not in installed]
        app.state.pipeline = tuple(installed)
        logger.info(f"Request pipeline: {' -> '.join(installed)}")
        if skipped:
            logger.info(f"Skipped pipeline stages: {', '.join(skipped)}")
        return installed
