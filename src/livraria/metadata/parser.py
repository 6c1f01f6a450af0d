# ABOUTME: Record parser turning raw catalog text into validated BookRecord values.
# ABOUTME: Accepts the brace-delimited line format or a JSON payload with a "livros" array.

import json
import logging
import re
from typing import Any

from livraria.errors import InputFormatError
from livraria.metadata.types import BookRecord

logger = logging.getLogger(__name__)

FIELD_COUNT = 9

# Keys of one book object inside the JSON payload, in BookRecord field order.
JSON_FIELDS = (
    "titulo",
    "autor",
    "genero",
    "sinopse",
    "anodepublicacao",
    "editora",
    "origem",
    "numerodepaginas",
    "ISBN",
)

# Fields before the synopsis, and after it. The synopsis takes whatever is left.
_LEADING_FIELDS = 3
_TRAILING_FIELDS = 5

_GROUP_SEPARATOR_RE = re.compile(r"\},\s*\{")
_CODE_FENCE_RE = re.compile(r"^```[a-zA-Z]*\s*(.*?)\s*```$", re.DOTALL)

# Largest value an SQLite INTEGER column can hold.
_SQLITE_INT_MAX = 2**63 - 1


def strip_code_fence(content: str) -> str:
    """Remove a surrounding markdown code fence such as ```json ... ```.

    Text without a fence is returned trimmed but otherwise unchanged.
    """
    text = content.strip()
    match = _CODE_FENCE_RE.match(text)
    return match.group(1) if match else text


def _parse_int(value: str, field_name: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise InputFormatError(f"{field_name} is not an integer: {value!r}") from exc
    if not -_SQLITE_INT_MAX - 1 <= number <= _SQLITE_INT_MAX:
        raise InputFormatError(f"{field_name} is out of range: {value!r}")
    return number


def _build_record(fields: list[str]) -> BookRecord:
    """Build a BookRecord from nine raw values in field order.

    Raises:
        InputFormatError: If a field is missing or empty, or if the year
            or page count is not an integer.
    """
    if len(fields) != FIELD_COUNT:
        raise InputFormatError(f"expected {FIELD_COUNT} fields, got {len(fields)}")

    values = [f.strip() for f in fields]
    empty = [JSON_FIELDS[i] for i, v in enumerate(values) if not v]
    if empty:
        raise InputFormatError(f"empty field(s): {', '.join(empty)}")

    title, author, genre, synopsis, year, publisher, origin, pages, isbn = values
    return BookRecord(
        title=title,
        author=author,
        genre=genre,
        synopsis=synopsis,
        publication_year=_parse_int(year, "publication year"),
        publisher=publisher,
        origin=origin,
        page_count=_parse_int(pages, "page count"),
        isbn=isbn,
    )


def _split_group(group: str) -> list[str]:
    """Split one delimited group into its nine raw fields.

    Title, author, and genre are split from the left and the five trailing
    fields from the right, so commas inside the synopsis survive verbatim.
    A comma inside the genre cannot be told apart from one in the synopsis:
    the text after it is read as the start of the synopsis.
    """
    head = group.split(",", _LEADING_FIELDS)
    if len(head) <= _LEADING_FIELDS:
        raise InputFormatError(f"expected {FIELD_COUNT} fields, got {len(head)}")

    tail = head[_LEADING_FIELDS].rsplit(",", _TRAILING_FIELDS)
    if len(tail) <= _TRAILING_FIELDS:
        raise InputFormatError(
            f"expected {FIELD_COUNT} fields, got {_LEADING_FIELDS + len(tail)}"
        )
    return [*head[:_LEADING_FIELDS], *tail]


def parse_delimited(text: str) -> list[BookRecord]:
    """Parse the `{field,...},{field,...}` format.

    Braces are stripped from the very start and end only, then the body
    is split on `},{`. Malformed groups are dropped with a warning.
    """
    body = text.strip().removeprefix("{").removesuffix("}")
    if not body.strip():
        return []

    records: list[BookRecord] = []
    for group in _GROUP_SEPARATOR_RE.split(body):
        try:
            records.append(_build_record(_split_group(group)))
        except InputFormatError as exc:
            logger.warning("Dropping malformed record %r: %s", group, exc)
    return records


def _json_value(value: Any) -> str:
    if value is None or isinstance(value, (dict, list, bool)):
        return ""
    return str(value)


def parse_livros_payload(payload: Any) -> list[BookRecord]:
    """Parse a decoded JSON payload of the form {"livros": [{...}, ...]}.

    Individual book objects that are incomplete or carry non-integer year
    or page count are dropped with a warning.

    Raises:
        InputFormatError: If the payload is not an object holding a
            "livros" array.
    """
    if not isinstance(payload, dict):
        raise InputFormatError(f"expected a JSON object, got {type(payload).__name__}")
    books = payload.get("livros")
    if not isinstance(books, list):
        raise InputFormatError('JSON payload has no "livros" array')

    records: list[BookRecord] = []
    for index, item in enumerate(books):
        if not isinstance(item, dict):
            logger.warning("Dropping livros[%d]: not an object: %r", index, item)
            continue
        try:
            records.append(_build_record([_json_value(item.get(k)) for k in JSON_FIELDS]))
        except InputFormatError as exc:
            logger.warning("Dropping livros[%d] %r: %s", index, item.get("titulo"), exc)
    return records


def parse_catalog_text(raw: str | None) -> list[BookRecord]:
    """Parse a raw catalog response in either supported shape.

    Content that decodes as JSON takes the JSON path; anything else is
    treated as the delimited format. Empty or blank input yields an empty
    list. Output order follows input order and nothing is deduplicated.

    Raises:
        InputFormatError: If the content is JSON but not a "livros" payload.
    """
    if raw is None:
        return []
    text = strip_code_fence(raw)
    if not text:
        return []

    try:
        payload = json.loads(text)
    except json.JSONDecodeError:
        return parse_delimited(text)
    return parse_livros_payload(payload)
