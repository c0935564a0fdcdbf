"""
Endpoint filter chain.

An endpoint is served by an ordered list of filters followed by a handler.
Each filter receives the FilterContext and a ``next`` callable; it either
returns a terminal response itself or awaits ``next(context)`` and returns
what the rest of the chain produced.
"""

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, List, Optional, Protocol, Sequence, Type, TypeVar

from fastapi import Request

T = TypeVar("T")

EndpointHandler = Callable[["FilterContext"], Awaitable[Any]]


@dataclass
class FilterContext:
    """
    Per-request state handed down the chain.

    Attributes:
        request: The incoming Starlette/FastAPI request
        arguments: Values bound from the request (e.g. the parsed body);
            a value that failed to bind is simply absent
    """
    request: Request
    arguments: List[Any] = field(default_factory=list)

    def get_argument(self, model: Type[T]) -> Optional[T]:
        """First bound argument that is an instance of ``model``, if any."""
        for argument in self.arguments:
            if isinstance(argument, model):
                return argument
        return None


class EndpointFilter(Protocol):
    async def __call__(self, context: FilterContext, next: EndpointHandler) -> Any:
        ...


class FilterChain:
    """Runs ``filters`` in order, then ``handler``."""

    def __init__(self, filters: Sequence[EndpointFilter], handler: EndpointHandler) -> None:
        self._filters = tuple(filters)
        self._handler = handler

    async def invoke(self, context: FilterContext) -> Any:
        return await self._dispatch(0, context)

    async def _dispatch(self, index: int, context: FilterContext) -> Any:
        if index == len(self._filters):
            return await self._handler(context)

        async def next_step(ctx: FilterContext) -> Any:
            return await self._dispatch(index + 1, ctx)

        return await self._filters[index](context, next_step)
