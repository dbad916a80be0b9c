"""
Read-only catalog of tools, charge policies and holiday rules.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple

from toolrental.schema.entities import ChargePolicy, Tool
from toolrental.schema.holidays import HolidayRule


@dataclass(frozen=True)
class Catalog:
    """Immutable lookup tables used by checkout.

    Attributes:
        tools: Tools keyed by tool code
        policies: Charge policies keyed by tool type
        holidays: Holiday rules, in definition order
    """

    tools: Mapping[str, Tool] = field(default_factory=dict)
    policies: Mapping[str, ChargePolicy] = field(default_factory=dict)
    holidays: Tuple[HolidayRule, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "tools", MappingProxyType(dict(self.tools)))
        object.__setattr__(self, "policies", MappingProxyType(dict(self.policies)))
        object.__setattr__(self, "holidays", tuple(self.holidays))

    @classmethod
    def from_records(
        cls,
        tools: Iterable[Tool],
        policies: Iterable[ChargePolicy],
        holidays: Iterable[HolidayRule] = (),
    ) -> "Catalog":
        """Build a catalog from flat record lists; later duplicates win."""
        return cls(
            tools={tool.code: tool for tool in tools},
            policies={policy.tool_type: policy for policy in policies},
            holidays=tuple(holidays),
        )

    def lookup_tool(self, code: str) -> Optional[Tool]:
        return self.tools.get(code)

    def lookup_policy(self, tool_type: str) -> Optional[ChargePolicy]:
        return self.policies.get(tool_type)

    def tool_codes(self) -> Tuple[str, ...]:
        return tuple(self.tools)
