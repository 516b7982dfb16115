"""Route registration grouped by resource prefix."""

from typing import Callable, List, Tuple

from fastapi import APIRouter, Depends

from ..core.exceptions import DuplicateRouteError
from ..schemas import ErrorResponse
from .dependencies import protect_route


class RouteRegistrar:
    """Binds verb+path pairs to handlers under one prefix.

    Protected routes run the guard as a route dependency, so a rejected
    request never reaches the handler.
    """

    def __init__(self, prefix: str = "", tags: List[str] = None, guard: Callable = protect_route):
        self.router = APIRouter(prefix=prefix, tags=tags or [])
        self.prefix = prefix
        self.guard = guard
        self._declared: List[Tuple[str, str, bool]] = []

    @property
    def routes(self) -> List[Tuple[str, str, bool]]:
        """Declared (method, full path, protected) triples in order."""
        return list(self._declared)

    def route(self, method: str, path: str, *, protected: bool = False, **kwargs):
        method = method.upper()
        dependencies = list(kwargs.pop("dependencies", []))
        if protected:
            dependencies.insert(0, Depends(self.guard))
            responses = dict(kwargs.pop("responses", None) or {})
            responses.setdefault(401, {"model": ErrorResponse})
            kwargs["responses"] = responses

        def decorator(endpoint: Callable) -> Callable:
            full_path = self.prefix + path
            if any(m == method and p == full_path for m, p, _ in self._declared):
                raise DuplicateRouteError(method, full_path)
            self._declared.append((method, full_path, protected))
            self.router.add_api_route(
                path,
                endpoint,
                methods=[method],
                dependencies=dependencies,
                **kwargs,
            )
            return endpoint

        return decorator

    def get(self, path: str, **kwargs):
        return self.route("GET", path, **kwargs)

    def post(self, path: str, **kwargs):
        return self.route("POST", path, **kwargs)

    def put(self, path: str, **kwargs):
        return self.route("PUT", path, **kwargs)

    def delete(self, path: str, **kwargs):
        return self.route("DELETE", path, **kwargs)
