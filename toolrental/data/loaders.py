"""
Catalog loaders.

Provides the built-in catalog source and a JSON file source. The JSON document
has the shape::

    {
      "tools": [{"code": "LADW", "type": "Ladder", "brand": "Werner"}],
      "charges": [{"type": "Ladder", "daily_charge_cents": 199,
                   "weekday": true, "weekend": true, "holiday": false}],
      "holidays": [
        {"kind": "fixed_day", "month": 7, "day_of_month": 4,
         "observed_on_closest_weekday": true, "name": "Independence Day"},
        {"kind": "nth_weekday", "month": 9, "weekday": "MONDAY", "nth_of_month": 1}
      ]
    }
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from toolrental.conventions.types import HolidayType
from toolrental.data.base import BaseCatalogSource
from toolrental.data.builtin import DEFAULT_CATALOG
from toolrental.data.catalog import Catalog
from toolrental.exceptions import CatalogError
from toolrental.schema.entities import ChargePolicy, Tool
from toolrental.schema.holidays import FixedDayHoliday, HolidayRule, NthWeekdayHoliday

logger = logging.getLogger(__name__)

_TOOL_KEYS = {"code", "type", "brand"}
_CHARGE_KEYS = {"type", "daily_charge_cents", "weekday", "weekend", "holiday"}


class BuiltinCatalogSource(BaseCatalogSource):
    """Catalog compiled into the package."""

    def _load(self) -> Catalog:
        return DEFAULT_CATALOG


class JSONCatalogSource(BaseCatalogSource):
    """
    Load the catalog from a JSON file.

    Useful for testing or for running with a different tool inventory.
    """

    def __init__(self, path: Union[str, Path]):
        """
        Initialize JSON catalog source.

        Args:
            path: Path to the JSON catalog file
        """
        super().__init__()
        self.path = Path(path)

    def _load_json_file(self) -> Dict[str, Any]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as exc:
            raise CatalogError(f"Cannot read catalog {self.path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise CatalogError(f"Catalog {self.path} is not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise CatalogError(f"Catalog {self.path} must be a JSON object")
        return data

    def _load(self) -> Catalog:
        data = self._load_json_file()
        try:
            tools = [self._parse_tool(t) for t in _records(data, "tools")]
            charges = [self._parse_charge(c) for c in _records(data, "charges")]
            holidays = [self._parse_holiday(h) for h in _records(data, "holidays")]
        except CatalogError:
            raise
        except (KeyError, TypeError, ValueError) as exc:
            raise CatalogError(f"Malformed catalog {self.path}: {exc!r}") from exc

        logger.info(
            "Loaded catalog %s: %s tools, %s charges, %s holidays",
            self.path, len(tools), len(charges), len(holidays),
        )
        return Catalog.from_records(tools, charges, holidays)

    def _parse_tool(self, record: Dict[str, Any]) -> Tool:
        self._warn_unknown("tool", record, _TOOL_KEYS)
        return Tool(code=str(record["code"]), type=str(record["type"]), brand=str(record["brand"]))

    def _parse_charge(self, record: Dict[str, Any]) -> ChargePolicy:
        self._warn_unknown("charge", record, _CHARGE_KEYS)
        cents = record["daily_charge_cents"]
        if isinstance(cents, bool) or not isinstance(cents, int):
            raise CatalogError(f"daily_charge_cents must be an integer, got {cents!r}")
        return ChargePolicy(
            tool_type=str(record["type"]),
            daily_charge_cents=cents,
            charged_on_weekday=_flag(record, "weekday"),
            charged_on_weekend=_flag(record, "weekend"),
            charged_on_holiday=_flag(record, "holiday"),
        )

    def _parse_holiday(self, record: Dict[str, Any]) -> HolidayRule:
        kind = HolidayType(record["kind"])
        observed = bool(record.get("observed_on_closest_weekday", False))
        name = str(record.get("name", ""))

        if kind == HolidayType.FIXED_DAY:
            return FixedDayHoliday(
                month=int(record["month"]),
                day_of_month=int(record["day_of_month"]),
                observed_on_closest_weekday=observed,
                name=name,
            )
        elif kind == HolidayType.NTH_WEEKDAY:
            return NthWeekdayHoliday(
                month=int(record["month"]),
                weekday=record["weekday"],
                nth_of_month=int(record.get("nth_of_month", 1)),
                observed_on_closest_weekday=observed,
                name=name,
            )
        else:
            raise CatalogError(f"Unsupported holiday kind: {kind}")

    def _warn_unknown(self, what: str, record: Dict[str, Any], known: set) -> None:
        extra = set(record) - known
        if extra:
            logger.warning("Ignoring unknown %s fields in %s: %s", what, self.path, sorted(extra))


def _records(data: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    records = data.get(key, [])
    if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
        raise CatalogError(f"'{key}' must be a list of objects")
    return records


def _flag(record: Dict[str, Any], key: str) -> bool:
    value = record[key]
    if not isinstance(value, bool):
        raise CatalogError(f"'{key}' must be true or false, got {value!r}")
    return value
