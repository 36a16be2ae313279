import math
from typing import Any, Mapping, Optional
from urllib.parse import quote

# characters encodeURIComponent leaves untouched besides alphanumerics and "-_.~"
_SAFE_CHARS = "!*'()"


def stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float):
        return _format_float(value)
    return str(value)


def _format_float(value: float) -> str:
    # JavaScript number-to-string: integral values below 1e21 have no fraction
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def encode_query_param(key: Any, value: Any) -> str:
    encoded_key = quote(str(key), safe=_SAFE_CHARS)
    return f"{encoded_key}={quote(stringify(value), safe=_SAFE_CHARS)}"


def to_query_string(query: Optional[Mapping[Any, Any]]) -> str:
    """Encode a mapping into a query string without the leading ``?``.

    Keys whose value is ``None`` are skipped. List and tuple values produce one
    ``key=value`` pair per element.
    """
    pairs = []
    for key, value in (query or {}).items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend(encode_query_param(key, item) for item in value)
        else:
            pairs.append(encode_query_param(key, value))
    return "&".join(pairs)


def add_query_params(query: Optional[Mapping[Any, Any]]) -> str:
    query_string = to_query_string(query)
    return f"?{query_string}" if query_string else ""
