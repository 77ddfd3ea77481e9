"""BaseService — foundation for services operating on a workspace.

Every service receives a :class:`Workspace` at construction time. The
workspace owns the snapshot path, the snapshot store, and the loaded graph.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Concatenate, ParamSpec, TypeVar

from wgraph.infrastructure.workspace import SnapshotLoadError
from wgraph.services.algorithms import GraphAlgorithms
from wgraph.services.result import ServiceResult

if TYPE_CHECKING:
    from wgraph.infrastructure.workspace import Workspace

logger = logging.getLogger(__name__)

_P = ParamSpec("_P")
_S = TypeVar("_S", bound="BaseService")


def reports_load_errors(
    func: Callable[Concatenate[_S, _P], ServiceResult],
) -> Callable[Concatenate[_S, _P], ServiceResult]:
    """Decorator: turn an unreadable snapshot into a ``LOAD_FAILED`` result."""

    @functools.wraps(func)
    def wrapper(self: _S, *args: _P.args, **kwargs: _P.kwargs) -> ServiceResult:
        try:
            return func(self, *args, **kwargs)
        except SnapshotLoadError as exc:
            logger.debug("%s aborted: %s", func.__name__, exc)
            return ServiceResult.fail(func.__name__, "LOAD_FAILED", str(exc), path=str(exc.path))

    return wrapper


class BaseService:
    """Base for service-layer classes.

    Usage::

        class GraphService(BaseService):
            @reports_load_errors
            def info(self) -> ServiceResult:
                g = self._workspace.graph
                ...
    """

    def __init__(self, workspace: Workspace) -> None:
        self._workspace = workspace

    def _algorithms(self) -> GraphAlgorithms:
        """Algorithms bound to the workspace graph and snapshot store."""
        return GraphAlgorithms(self._workspace.graph, store=self._workspace.store)

    def _commit(self, op: str, data: dict[str, object]) -> ServiceResult:
        """Save the workspace graph and wrap *data* in a result."""
        if not self._workspace.commit():
            return ServiceResult.fail(
                op,
                "SAVE_FAILED",
                f"Could not save graph to {self._workspace.path}",
                path=str(self._workspace.path),
            )
        return ServiceResult(ok=True, op=op, data=data)
