"""Tests for the request and context adapters."""

from jinja2 import Environment

from fastapi_pagelinks.web.context import JinjaTemplateContext, SimpleTemplateContext, compile_expression
from fastapi_pagelinks.web.exchange import (
    RequestURIWebRequest,
    ScopeWebExchange,
    StarletteWebExchange,
    build_exchange,
    group_parameters,
)


def test_group_parameters_keeps_first_occurrence_order():
    pairs = [("b", "1"), ("a", "2"), ("b", "3")]

    assert list(group_parameters(pairs).items()) == [("b", ["1", "3"]), ("a", ["2"])]


class TestStarletteExchange:
    def test_request_capabilities(self, make_request):
        exchange = build_exchange(make_request("/items", "x=1&x=2&y=", scheme="https", server=("example.com", 443)))

        assert isinstance(exchange, StarletteWebExchange)
        assert isinstance(exchange.request, RequestURIWebRequest)
        assert exchange.request.request_uri == "/items"
        assert exchange.request.scheme == "https"
        assert exchange.request.server_name == "example.com"
        assert exchange.request.server_port == 443
        assert exchange.request.parameter_map() == {"x": ["1", "2"], "y": [""]}

    def test_attributes(self, make_request):
        exchange = build_exchange(make_request(state={"a": 1, "b": 2}))

        assert exchange.attribute_names() == ["a", "b"]
        assert exchange.get_attribute("b") == 2
        assert exchange.get_attribute("missing") is None

    def test_no_state(self, make_request):
        assert build_exchange(make_request()).attribute_names() == []


class TestScopeExchange:
    def test_request_capabilities(self, make_scope):
        exchange = build_exchange(make_scope("/items", "a=1", server=("example.com", 8000)))

        assert isinstance(exchange, ScopeWebExchange)
        assert not isinstance(exchange.request, RequestURIWebRequest)
        assert exchange.request.server_port == 8000
        assert exchange.request.request_path == "/items"
        assert exchange.request.parameter_map() == {"a": ["1"]}

    def test_missing_server(self, make_scope):
        exchange = build_exchange(make_scope(server=None))

        assert exchange.request.server_name is None
        assert exchange.request.server_port is None


def test_build_exchange_passthrough_and_unknown(make_scope):
    exchange = ScopeWebExchange(make_scope())

    assert build_exchange(exchange) is exchange
    assert build_exchange(None) is None
    assert build_exchange("not a request") is None


class TestContexts:
    def test_simple_context(self, make_request):
        request = make_request()
        context = SimpleTemplateContext({"request": request, "n": 2})

        assert context.get_variable("n") == 2
        assert context.get_variable("missing") is None
        assert context.evaluate("n * 3") == 6
        assert context.evaluate("missing") is None
        assert isinstance(context.exchange, StarletteWebExchange)

    def test_explicit_exchange_wins(self, make_request, make_scope):
        context = SimpleTemplateContext({"request": make_request()}, exchange=make_scope())

        assert isinstance(context.exchange, ScopeWebExchange)

    def test_jinja_context(self, make_request):
        env = Environment()
        template = env.from_string("")
        jinja_context = template.new_context({"request": make_request(), "n": 4})
        context = JinjaTemplateContext(jinja_context)

        assert context.get_variable("n") == 4
        assert context.evaluate("n + 1") == 5
        assert isinstance(context.exchange, StarletteWebExchange)

    def test_expressions_are_compiled_once_per_environment(self):
        env = Environment()

        assert compile_expression(env, "results.page") is compile_expression(env, "results.page")
        assert compile_expression(env, "results.page") is not compile_expression(Environment(), "results.page")

    def test_simple_contexts_share_compiled_expressions(self):
        first = SimpleTemplateContext({"n": 1})
        second = SimpleTemplateContext({"n": 2})
        hits = compile_expression.cache_info().hits

        assert first.evaluate("n * 10") == 10
        assert second.evaluate("n * 10") == 20
        assert compile_expression.cache_info().hits > hits
