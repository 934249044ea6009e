"""Unit validation and selection.

Selection zooms out through ``PRIORITY`` until the difference in a unit is
below that unit's threshold; ``year`` is the terminal fallback.
"""

from __future__ import annotations

import logging
from typing import Mapping

from reltime.config import get_config
from reltime.exceptions import InvalidUnitError
from reltime.protocols import PRIORITY, Unit


logger = logging.getLogger(__name__)

_UNIT_NAMES = [unit.value for unit in PRIORITY]


def validate_units(units: str | Unit) -> Unit:
    """Validate a fixed ``units`` option.

    Raises:
        InvalidUnitError: With a singular suggestion for plural mistakes
            ("days" -> "day"), otherwise listing every valid unit
    """
    if isinstance(units, Unit):
        return units

    if units in _UNIT_NAMES:
        return Unit(units)

    suggestion = units[:-1] if isinstance(units, str) and units.endswith("s") else None
    if suggestion in _UNIT_NAMES:
        raise InvalidUnitError(units, _UNIT_NAMES, suggestion=suggestion)
    raise InvalidUnitError(str(units), _UNIT_NAMES)


def select_unit(
    diff_report: Mapping[str, int],
    thresholds: Mapping[str, int] | None = None,
) -> Unit:
    """Pick the finest unit whose magnitude is below its threshold.

    Args:
        diff_report: Signed per-unit differences, indexable by unit name
        thresholds: Threshold table; read from the current config when omitted

    Returns:
        The selected unit (``Unit.YEAR`` if no threshold is met)
    """
    if thresholds is None:
        thresholds = get_config().thresholds

    for unit in PRIORITY:
        threshold = thresholds.get(unit.value)
        if threshold is not None and abs(diff_report[unit.value]) < threshold:
            break

    logger.debug("Selected unit '%s'", unit.value)
    return unit
