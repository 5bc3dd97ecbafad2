"""Well-known template context keys and URL string constants."""

# Context keys read while building links.
PAGE_VARIABLE_KEY = "pagination_page_object"
PAGE_EXPRESSION = "page"
PAGINATION_URL_KEY = "pagination_url"
PAGINATION_QUALIFIER_PREFIX = "pagination_qualifier"
PAGINATION_JS_FUNCTION_KEY = "pagination_js_function"
PAGINATION_SPLIT_KEY = "pagination_split"

DEFAULT_PAGINATION_SPLIT = 7

# Query parameter names.
PAGE = "page"
SIZE = "size"
SORT = "sort"

EMPTY = ""
BLANK = " "
COMMA = ","
AND = "&"
Q_MARK = "?"
EQ = "="
UNDERSCORE = "_"
SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'
PARENTHESIS_OPEN = "("
PARENTHESIS_CLOSE = ")"
JAVASCRIPT_VOID_0 = "javascript:void(0)"
ONCLICK = "onclick"
THIS = "this"
