"""Request and template context adapters."""

from .context import JinjaTemplateContext, SimpleTemplateContext, TemplateContext
from .exchange import (
    RequestURIWebRequest,
    ScopeWebExchange,
    ScopeWebRequest,
    StarletteWebExchange,
    StarletteWebRequest,
    WebExchange,
    WebRequest,
    build_exchange,
)

__all__ = [
    "JinjaTemplateContext",
    "SimpleTemplateContext",
    "TemplateContext",
    "RequestURIWebRequest",
    "ScopeWebExchange",
    "ScopeWebRequest",
    "StarletteWebExchange",
    "StarletteWebRequest",
    "WebExchange",
    "WebRequest",
    "build_exchange",
]
