"""
Built-in tool, charge and holiday data.
"""

from toolrental.conventions.types import Weekday
from toolrental.data.catalog import Catalog
from toolrental.schema.entities import ChargePolicy, Tool
from toolrental.schema.holidays import FixedDayHoliday, NthWeekdayHoliday

# Tool types
CHAINSAW = "Chainsaw"
LADDER = "Ladder"
JACKHAMMER = "Jackhammer"

DEFAULT_TOOLS = (
    Tool(code="CHNS", type=CHAINSAW, brand="Stihl"),
    Tool(code="LADW", type=LADDER, brand="Werner"),
    Tool(code="JAKD", type=JACKHAMMER, brand="DeWalt"),
    Tool(code="JAKR", type=JACKHAMMER, brand="Ridgid"),
)

DEFAULT_CHARGES = (
    ChargePolicy(
        tool_type=LADDER,
        daily_charge_cents=199,
        charged_on_weekday=True,
        charged_on_weekend=True,
        charged_on_holiday=False,
    ),
    ChargePolicy(
        tool_type=CHAINSAW,
        daily_charge_cents=149,
        charged_on_weekday=True,
        charged_on_weekend=False,
        charged_on_holiday=True,
    ),
    ChargePolicy(
        tool_type=JACKHAMMER,
        daily_charge_cents=299,
        charged_on_weekday=True,
        charged_on_weekend=False,
        charged_on_holiday=False,
    ),
)

INDEPENDENCE_DAY = FixedDayHoliday(
    month=7,
    day_of_month=4,
    observed_on_closest_weekday=True,
    name="Independence Day",
)

LABOR_DAY = NthWeekdayHoliday(
    month=9,
    weekday=Weekday.MONDAY,
    nth_of_month=1,
    name="Labor Day",
)

DEFAULT_HOLIDAYS = (INDEPENDENCE_DAY, LABOR_DAY)

DEFAULT_CATALOG = Catalog.from_records(DEFAULT_TOOLS, DEFAULT_CHARGES, DEFAULT_HOLIDAYS)
