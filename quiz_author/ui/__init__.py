"""Qt widgets for Quiz Author."""

from .components.change_type_panel import ChangeTypePanel
from .components.counter_panel import CounterPanel
from .components.cycle_holiday_panel import CycleHolidayPanel
from .components.two_dice_panel import TwoDicePanel
from .showcase_window import ShowcaseWindow

__all__ = [
    "ChangeTypePanel",
    "CounterPanel",
    "CycleHolidayPanel",
    "ShowcaseWindow",
    "TwoDicePanel",
]
