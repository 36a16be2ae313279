import io
from enum import Enum
from typing import Any, Callable, Iterator, Optional

from pydantic import BaseModel
from pydantic_core import to_json

from ._query import stringify, to_query_string


class ContentType(str, Enum):
    JSON = "application/json"
    JSON_API = "application/vnd.api+json"
    FORM_DATA = "multipart/form-data"
    URL_ENCODED = "application/x-www-form-urlencoded"
    TEXT = "text/plain"


class FormData:
    """Ordered multipart container.

    Parts are ``(name, value)`` pairs. A value is either text or something the
    transport can upload as a file: ``bytes``, ``bytearray``, a binary file
    object or an httpx file tuple ``(filename, content[, content_type])``.
    """

    def __init__(self) -> None:
        self._parts: list[tuple[str, Any]] = []

    def append(self, name: str, value: Any) -> None:
        self._parts.append((name, value))

    def get(self, name: str) -> Optional[Any]:
        for part_name, value in self._parts:
            if part_name == name:
                return value
        return None

    def get_all(self, name: str) -> list[Any]:
        return [value for part_name, value in self._parts if part_name == name]

    def to_httpx_files(self) -> list[tuple[str, Any]]:
        """Return the parts in the shape ``httpx`` accepts for ``files=``.

        Text parts are sent with no filename, so they arrive as regular form
        fields while the body stays multipart.
        """
        files: list[tuple[str, Any]] = []
        for name, value in self._parts:
            if is_binary(value):
                files.append((name, value))
            else:
                files.append((name, (None, value)))
        return files

    def __iter__(self) -> Iterator[tuple[str, Any]]:
        return iter(self._parts)

    def __len__(self) -> int:
        return len(self._parts)

    def __repr__(self) -> str:
        return f"FormData({[name for name, _ in self._parts]!r})"


def _is_file_content(value: Any) -> bool:
    return isinstance(value, (bytes, bytearray, io.IOBase))


def is_file_tuple(value: Any) -> bool:
    """``(filename, content[, content_type[, headers]])`` as httpx accepts it."""
    return (
        isinstance(value, tuple)
        and 2 <= len(value) <= 4
        and (value[0] is None or isinstance(value[0], str))
        and (_is_file_content(value[1]) or isinstance(value[1], str))
    )


def is_binary(value: Any) -> bool:
    return _is_file_content(value) or is_file_tuple(value)


def _is_json_object(value: Any) -> bool:
    return isinstance(value, (dict, list, tuple, BaseModel))


def dump_json(value: Any) -> str:
    return to_json(value, by_alias=True).decode("utf-8")


def format_json(value: Any) -> Any:
    if value is not None and (_is_json_object(value) or isinstance(value, str)):
        return dump_json(value)
    return value


def format_text(value: Any) -> Any:
    if value is not None and not isinstance(value, str):
        return dump_json(value)
    return value


def format_form_data(value: Any) -> FormData:
    if isinstance(value, FormData):
        return value

    if isinstance(value, BaseModel):
        value = value.model_dump(by_alias=True)

    form_data = FormData()
    for key, item in (value or {}).items():
        if is_binary(item):
            form_data.append(key, item)
        elif _is_json_object(item):
            form_data.append(key, dump_json(item))
        else:
            form_data.append(key, stringify(item))
    return form_data


def format_url_encoded(value: Any) -> str:
    if isinstance(value, BaseModel):
        value = value.model_dump(by_alias=True)
    return to_query_string(value)


CONTENT_FORMATTERS: dict[ContentType, Callable[[Any], Any]] = {
    ContentType.JSON: format_json,
    ContentType.JSON_API: format_json,
    ContentType.TEXT: format_text,
    ContentType.FORM_DATA: format_form_data,
    ContentType.URL_ENCODED: format_url_encoded,
}


def encode_body(content_type: Optional[ContentType], value: Any) -> Any:
    """Produce the wire payload for ``value`` under ``content_type``.

    JSON is used when no content type is given.
    """
    formatter = CONTENT_FORMATTERS[ContentType(content_type or ContentType.JSON)]
    return formatter(value)
