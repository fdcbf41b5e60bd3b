"""PostgreSQL connection string helpers."""

from __future__ import annotations

from urllib.parse import parse_qs, unquote, urlsplit

from gmrc.exceptions import DatabaseNameError

_DATABASE_QUERY_KEYS = ("dbname", "db")


def get_database_name(connection_string: str) -> str:
    """Extract the database name from a connection string.

    Supports ``postgres://`` and ``postgresql://`` URIs, where the name is
    the path component (``postgres://user@host:5432/app``), and ``socket:``
    URIs, where it is the ``db`` query parameter
    (``socket:/var/run/postgresql?db=app``). A ``dbname`` or ``db`` query
    parameter also works for URIs without a path.

    Raises:
        DatabaseNameError: If no database name is present
    """
    parts = urlsplit(connection_string.strip())

    if parts.scheme != "socket":
        name = unquote(parts.path.lstrip("/"))
        if name:
            return name

    query = parse_qs(parts.query)
    for key in _DATABASE_QUERY_KEYS:
        values = query.get(key)
        if values and values[0]:
            return values[0]

    raise DatabaseNameError(
        "Could not determine database name from connection string.",
        hint="Include the database in the URL, e.g. postgres://localhost/mydb",
    )
