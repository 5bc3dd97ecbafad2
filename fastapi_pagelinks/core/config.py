"""Configuration for context keys and parameter names."""

from pydantic import BaseModel, ConfigDict, Field

from . import keys


class PaginationConfig(BaseModel):
    """Names used to look up pagination state and to write query parameters.

    The defaults match the constants in :mod:`fastapi_pagelinks.core.keys`.
    Override them when templates bind the page object or the link options
    under different names.
    """

    model_config = ConfigDict(frozen=True)

    page_variable_key: str = keys.PAGE_VARIABLE_KEY
    page_expression: str = keys.PAGE_EXPRESSION
    url_key: str = keys.PAGINATION_URL_KEY
    qualifier_key: str = keys.PAGINATION_QUALIFIER_PREFIX
    js_function_key: str = keys.PAGINATION_JS_FUNCTION_KEY
    split_key: str = keys.PAGINATION_SPLIT_KEY
    page_param: str = keys.PAGE
    size_param: str = keys.SIZE
    sort_param: str = keys.SORT
    default_split: int = Field(default=keys.DEFAULT_PAGINATION_SPLIT, ge=1)


DEFAULT_CONFIG = PaginationConfig()
