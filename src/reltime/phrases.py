"""Exact-match relative phrases ("yesterday", "next month", "now")."""

from __future__ import annotations

from reltime.catalog import LocaleCatalog, get_catalog
from reltime.protocols import Unit


def resolve_exact(
    locale: str,
    unit: Unit | str,
    offset: int,
    catalog: LocaleCatalog | None = None,
) -> str | None:
    """Look up the literal phrase for an exact signed offset in a unit.

    Returns None when the locale has no field data for the unit or no phrase
    for that offset; ranges never match.
    """
    if catalog is None:
        catalog = get_catalog()
    fields = catalog.lookup(locale)
    if not fields:
        return None

    field = fields.get(unit.value if isinstance(unit, Unit) else unit)
    if field is None or not field.relative:
        return None

    if isinstance(offset, float) and not offset.is_integer():
        return None
    return field.relative.get(int(offset))
