"""Lazily materialized connections over candidate sequences.

A connection is a paginated view over a candidate collection. It wraps
each raw item of the requested window in an edge; the edge computes the
externally shaped node (and an auxiliary local context) only when asked.

Guarantees:
    - construction only computes the window, nothing is transformed
    - items outside the window are never wrapped or transformed
    - each edge runs its node transform at most once
    - a failing transform fails its own edge only; the page still
      returns every other edge, and the failure is reported next to it
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Generic, Self, TypeVar

from buildserver_service.core.pagination.arguments import PaginationArguments
from buildserver_service.core.pagination.cursor import CursorCodec
from buildserver_service.core.pagination.schemas import PageInfo
from buildserver_service.infra.logging import get_lazy_logger

logger = logging.getLogger(__name__)
lazy_logger = get_lazy_logger(__name__)

S = TypeVar("S")
T = TypeVar("T")
E = TypeVar("E", bound="LazyEdge[Any, Any]")

_UNSET: Any = object()


class EdgeState(str, Enum):
    """Resolution state of a ``LazyEdge``."""

    UNRESOLVED = "unresolved"
    # Transient: the node transform of this edge is running
    RESOLVING = "resolving"
    RESOLVED = "resolved"
    FAILED = "failed"


class EdgeResolutionCycleError(RuntimeError):
    """Raised when an edge's node transform asks for that same node."""


class LazyEdge(Generic[S, T]):
    """Edge wrapping one raw source item.

    The node is computed by ``node_fn`` on first access and cached, as is
    the local context computed by ``local_context_fn``. The local context
    is a cheap projection of the source that nested resolvers reuse
    instead of looking the same data up again; it does not depend on the
    node resolving successfully.

    Example:
        edge = LazyEdge(
            (profile, image),
            lambda pair: CloudImageNode.from_domain(*pair),
            lambda pair: pair[1],
        )
        edge.get_node()           # runs the transform
        edge.get_node()           # cached
        edge.get_local_context()  # the image
    """

    def __init__(
        self,
        data: S,
        node_fn: Callable[[S], T],
        local_context_fn: Callable[[S], Any] | None = None,
    ) -> None:
        self.data = data
        self.position: int | None = None
        self._node_fn = node_fn
        self._local_context_fn = local_context_fn
        self._state = EdgeState.UNRESOLVED
        self._node: T | None = None
        self._error: Exception | None = None
        self._local_context: Any = _UNSET

    @property
    def state(self) -> EdgeState:
        return self._state

    @property
    def error(self) -> Exception | None:
        """Exception raised by the node transform, if it failed."""
        return self._error

    @property
    def failed(self) -> bool:
        return self._state is EdgeState.FAILED

    @property
    def cursor(self) -> str | None:
        """Opaque cursor for this edge, once it has a position."""
        if self.position is None:
            return None
        return CursorCodec.encode_index(self.position)

    def get_node(self) -> T | None:
        """Return the node, computing it on first call.

        Returns:
            The node, or None if the transform failed. The failure is kept
            in ``error`` and the transform is not retried.

        Raises:
            EdgeResolutionCycleError: If called from within this edge's
                own transform.
        """
        if self._state is EdgeState.RESOLVED:
            return self._node
        if self._state is EdgeState.FAILED:
            return None
        if self._state is EdgeState.RESOLVING:
            msg = f"Edge at position {self.position} requested its own node during resolution"
            raise EdgeResolutionCycleError(msg)

        self._state = EdgeState.RESOLVING
        try:
            node = self._node_fn(self.data)
        except Exception as e:
            self._state = EdgeState.FAILED
            self._error = e
            logger.warning(
                "Edge node resolution failed",
                extra={
                    "position": self.position,
                    "exception_type": type(e).__name__,
                    "exception_message": str(e),
                },
            )
            return None

        self._node = node
        self._state = EdgeState.RESOLVED
        return node

    def get_local_context(self) -> Any:
        """Return the local context, computing it on first call.

        Without a ``local_context_fn`` the raw source item is the context.
        """
        if self._local_context is _UNSET:
            if self._local_context_fn is None:
                self._local_context = self.data
            else:
                self._local_context = self._local_context_fn(self.data)
        return self._local_context

    def __repr__(self) -> str:
        return f"{type(self).__name__}(position={self.position}, state={self._state.value})"


@dataclass(frozen=True)
class EdgeError:
    """Resolution failure of one edge of a page."""

    position: int
    exception: Exception

    @property
    def cursor(self) -> str:
        return CursorCodec.encode_index(self.position)

    @property
    def message(self) -> str:
        return str(self.exception) or type(self.exception).__name__

    @property
    def type(self) -> str:
        return type(self.exception).__name__


@dataclass
class ConnectionResult(Generic[E]):
    """Edges of a computed page together with the failures of its window.

    ``edges`` only holds edges whose node resolved, in candidate order.
    Every edge of the window that failed has exactly one entry in
    ``errors``.
    """

    edges: list[E] = field(default_factory=list)
    errors: list[EdgeError] = field(default_factory=list)
    start: int = 0
    end: int = 0
    total_count: int = 0

    @property
    def nodes(self) -> list[Any]:
        return [edge.get_node() for edge in self.edges]

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def page_info(self) -> PageInfo:
        return PageInfo(
            has_previous_page=self.start > 0,
            has_next_page=self.end < self.total_count,
            start_cursor=CursorCodec.encode_index(self.start) if self.end > self.start else None,
            end_cursor=CursorCodec.encode_index(self.end - 1) if self.end > self.start else None,
            total_count=self.total_count,
        )


class ExtensibleConnection(ABC, Generic[T, E]):
    """Externally visible contract of a connection."""

    @abstractmethod
    def get_edges(self) -> ConnectionResult[E]:
        """Return the page's edges together with per-edge errors."""


class PaginatingConnection(ExtensibleConnection[T, E], Generic[S, T, E]):
    """Connection computing a window of edges over a candidate sequence.

    Args:
        data: Full candidate sequence; never mutated.
        edge_factory: Builds the edge for one raw item.
        pagination: Window to expose (everything by default).

    Example:
        connection = PaginatingConnection(
            projects,
            ProjectEdge,
            PaginationArguments.offset_based(offset=20, count=10),
        )
        result = connection.get_edges()
        result.nodes, result.errors, result.page_info
    """

    def __init__(
        self,
        data: Sequence[S],
        edge_factory: Callable[[S], E],
        pagination: PaginationArguments | None = None,
    ) -> None:
        self._data: Sequence[S] = data if isinstance(data, Sequence) else tuple(data)
        self._edge_factory = edge_factory
        self._pagination = pagination or PaginationArguments.everything()
        self._start, self._end = self._pagination.resolve(len(self._data))
        self._edges: dict[int, E] = {}
        self._factory_errors: dict[int, Exception] = {}

    @property
    def pagination(self) -> PaginationArguments:
        return self._pagination

    @property
    def window(self) -> tuple[int, int]:
        """Resolved ``(start, end)`` range of the page."""
        return self._start, self._end

    @property
    def total_count(self) -> int:
        return len(self._data)

    def get_edges(self) -> ConnectionResult[E]:
        edges: list[E] = []
        errors: list[EdgeError] = []

        for position in range(self._start, self._end):
            edge = self._edge_at(position)
            if edge is None:
                errors.append(EdgeError(position=position, exception=self._factory_errors[position]))
                continue

            edge.get_node()
            if edge.failed:
                errors.append(EdgeError(position=position, exception=edge.error))
                continue
            edges.append(edge)

        lazy_logger.debug(
            lambda: f"connection page [{self._start}, {self._end}) of {len(self._data)} "
            f"-> {len(edges)} edges, {len(errors)} errors",
        )
        return ConnectionResult(
            edges=edges,
            errors=errors,
            start=self._start,
            end=self._end,
            total_count=len(self._data),
        )

    def narrowed(
        self,
        predicate: Callable[[S], bool],
        pagination: PaginationArguments | None = None,
    ) -> PaginatingConnection[S, T, E]:
        """Build a sub-connection over the items matching ``predicate``.

        The sub-connection reuses this connection's raw data and edge
        factory; its window is ``pagination`` or, if omitted, this one's.
        """
        return PaginatingConnection(
            [item for item in self._data if predicate(item)],
            self._edge_factory,
            pagination or self._pagination,
        )

    def _edge_at(self, position: int) -> E | None:
        if position in self._edges:
            return self._edges[position]
        if position in self._factory_errors:
            return None

        try:
            edge = self._edge_factory(self._data[position])
        except Exception as e:
            logger.warning(
                "Edge construction failed",
                extra={"position": position, "exception_type": type(e).__name__},
            )
            self._factory_errors[position] = e
            return None

        edge.position = position
        self._edges[position] = edge
        return edge


class DelegatingConnection(ExtensibleConnection[T, E]):
    """Base for concrete connections backed by a ``PaginatingConnection``.

    Subclasses name their edge class; construction and ``empty()`` come
    for free:

        class ProjectsConnection(DelegatingConnection[ProjectNode, ProjectEdge]):
            edge_type = ProjectEdge
    """

    edge_type: ClassVar[Callable[[Any], LazyEdge[Any, Any]]]

    def __init__(self, data: Sequence[Any], pagination: PaginationArguments | None = None) -> None:
        self._delegate: PaginatingConnection[Any, T, E] = PaginatingConnection(
            data, self.edge_type, pagination
        )

    @classmethod
    def empty(cls) -> DelegatingConnection[T, E]:
        """Connection without any candidates."""
        return cls([], PaginationArguments.everything())

    def narrowed(
        self,
        predicate: Callable[[Any], bool],
        pagination: PaginationArguments | None = None,
    ) -> Self:
        """Connection of the same type over the items matching ``predicate``.

        Example:
            AgentsConnection(agents, pagination).narrowed(lambda agent: agent.authorized)
        """
        connection = type(self).__new__(type(self))
        connection._delegate = self._delegate.narrowed(predicate, pagination)
        return connection

    @property
    def delegate(self) -> PaginatingConnection[Any, T, E]:
        return self._delegate

    def get_edges(self) -> ConnectionResult[E]:
        return self._delegate.get_edges()


__all__ = [
    "ConnectionResult",
    "DelegatingConnection",
    "EdgeError",
    "EdgeResolutionCycleError",
    "EdgeState",
    "ExtensibleConnection",
    "LazyEdge",
    "PaginatingConnection",
]
