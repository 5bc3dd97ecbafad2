"""Template context adapters.

Link builders only need three things from the rendering context: named
variables, evaluation of a template expression, and optionally the web
exchange of the current request. Jinja2 contexts and plain mappings are
adapted to that shape here.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Mapping, Protocol

from jinja2 import Environment, TemplateError
from jinja2.environment import TemplateExpression
from jinja2.runtime import Context

from .exchange import WebExchange, build_exchange

logger = logging.getLogger(__name__)

REQUEST_VARIABLE = "request"

DEFAULT_ENVIRONMENT = Environment(autoescape=True)


class TemplateContext(Protocol):
    """Capabilities of a rendering context."""

    @property
    def exchange(self) -> WebExchange | None: ...

    def get_variable(self, key: str) -> Any: ...

    def evaluate(self, expression: str) -> Any: ...


@lru_cache(maxsize=128)
def compile_expression(environment: Environment, expression: str) -> TemplateExpression:
    """Compile ``expression`` once per environment; undefined results become ``None``."""
    return environment.compile_expression(expression, undefined_to_none=True)


def _evaluate(environment: Environment, expression: str, variables: Mapping[str, Any]) -> Any:
    try:
        compiled = compile_expression(environment, expression)
        return compiled(**variables)
    except TemplateError as exc:
        logger.debug("Expression %r could not be evaluated: %s", expression, exc)
        return None


class JinjaTemplateContext:
    """Adapter over the ``jinja2.runtime.Context`` of a running template."""

    def __init__(self, context: Context) -> None:
        self._context = context
        self._exchange = build_exchange(context.get(REQUEST_VARIABLE))

    @property
    def exchange(self) -> WebExchange | None:
        return self._exchange

    def get_variable(self, key: str) -> Any:
        return self._context.get(key)

    def evaluate(self, expression: str) -> Any:
        return _evaluate(self._context.environment, expression, self._context.get_all())


class SimpleTemplateContext:
    """Mapping-backed context for callers rendering outside of a template."""

    def __init__(
        self,
        variables: Mapping[str, Any] | None = None,
        exchange: Any = None,
        environment: Environment | None = None,
    ) -> None:
        self._variables = dict(variables or {})
        if exchange is None:
            exchange = self._variables.get(REQUEST_VARIABLE)
        self._exchange = build_exchange(exchange)
        self._environment = environment or DEFAULT_ENVIRONMENT

    @property
    def exchange(self) -> WebExchange | None:
        return self._exchange

    def get_variable(self, key: str) -> Any:
        return self._variables.get(key)

    def evaluate(self, expression: str) -> Any:
        return _evaluate(self._environment, expression, self._variables)
