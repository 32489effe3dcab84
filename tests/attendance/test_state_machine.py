from datetime import date
from decimal import Decimal

import pytest

from src.warehouse_timesheet.warehouse_timesheet.attendance.factory import MarkTransitionFactory
from src.warehouse_timesheet.warehouse_timesheet.attendance.model import Mark, WorkedAndExtra, WorkedHoursAndExtra
from src.warehouse_timesheet.warehouse_timesheet.attendance.state_machine import AttendanceStateMachine
from src.warehouse_timesheet.warehouse_timesheet.attendance.transitions.custom_day_transition import CustomDayTransition
from src.warehouse_timesheet.warehouse_timesheet.attendance.transitions.custom_hours_transition import CustomHoursTransition
from src.warehouse_timesheet.warehouse_timesheet.attendance.transitions.fixed_transitions import ClearTransition
from src.warehouse_timesheet.warehouse_timesheet.core.enums import MarkState

DAY = date(2026, 10, 5)


def test_next_state_follows_cycle_and_wraps():
    machine = AttendanceStateMachine()
    order = [MarkState.EMPTY]
    for _ in range(5):
        order.append(machine.next_state(order[-1]))

    assert order == [
        MarkState.EMPTY,
        MarkState.WORKED,
        MarkState.ABSENT,
        MarkState.CUSTOM_WORKED_OR_ABSENT,
        MarkState.CUSTOM_HOURS,
        MarkState.EMPTY,
    ]


def test_factory_picks_transition_for_next_state():
    factory = MarkTransitionFactory()

    assert isinstance(factory.for_advance(MarkState.ABSENT), CustomDayTransition)
    assert isinstance(factory.for_advance(MarkState.CUSTOM_WORKED_OR_ABSENT), CustomHoursTransition)
    assert isinstance(factory.for_advance(MarkState.CUSTOM_HOURS), ClearTransition)


@pytest.mark.parametrize(
    "custom, hourly",
    [
        (WorkedAndExtra(worked=True, extra=Decimal("500")), WorkedHoursAndExtra(worked=True, hours=10.0, extra=Decimal("0"))),
        (WorkedAndExtra(worked=False, extra=Decimal("-300")), WorkedHoursAndExtra(worked=False, hours=0.0, extra=Decimal("12.5"))),
    ],
)
def test_five_advances_return_to_empty(make_collector, custom, hourly):
    machine = AttendanceStateMachine()
    collector = make_collector(custom, hourly)

    mark = Mark.empty(DAY)
    for _ in range(5):
        mark = machine.advance(mark, collector)

    assert mark == Mark.empty(DAY)
    assert mark.worked is False
    assert mark.extra == 0
    assert mark.hours is None


def test_fixed_states_set_their_fields(make_collector):
    machine = AttendanceStateMachine()
    collector = make_collector()

    worked = machine.advance(Mark.empty(DAY), collector)
    assert (worked.state, worked.worked, worked.extra, worked.hours) == (MarkState.WORKED, True, 0, None)

    absent = machine.advance(worked, collector)
    assert (absent.state, absent.worked, absent.extra, absent.hours) == (MarkState.ABSENT, False, 0, None)
    assert collector.requests == []


def test_custom_states_take_collected_values(make_collector):
    machine = AttendanceStateMachine()
    collector = make_collector(
        WorkedAndExtra(worked=False, extra=Decimal("-250.75")),
        WorkedHoursAndExtra(worked=True, hours=4.5, extra=Decimal("100")),
    )

    custom = machine.advance(Mark.absent(DAY), collector)
    assert custom == Mark.custom(DAY, worked=False, extra=Decimal("-250.75"))

    hourly = machine.advance(custom, collector, default_hours=7)
    assert hourly.state is MarkState.CUSTOM_HOURS
    assert hourly.hours == 4.5
    assert hourly.worked is True
    assert hourly.extra == Decimal("100")

    # Dialogs open with worked checked, the current extra and the global hours.
    assert collector.requests == [
        ("worked_and_extra", True, Decimal("0")),
        ("worked_hours_and_extra", True, 7, Decimal("-250.75")),
    ]


@pytest.mark.parametrize("start", [Mark.absent(DAY), Mark.custom(DAY, worked=True, extra=Decimal("40"))])
def test_cancelled_input_leaves_mark_unchanged(make_collector, start):
    machine = AttendanceStateMachine()
    before = (start.state, start.worked, start.extra, start.hours)

    assert machine.advance(start, make_collector(None)) is None
    assert (start.state, start.worked, start.extra, start.hours) == before


def test_mark_rejects_hours_outside_custom_hours_state():
    with pytest.raises(ValueError):
        Mark(work_date=DAY, state=MarkState.WORKED, worked=True, hours=8.0)
    with pytest.raises(ValueError):
        Mark(work_date=DAY, state=MarkState.CUSTOM_HOURS, worked=True)
    with pytest.raises(ValueError):
        Mark(work_date=DAY, state=MarkState.ABSENT, extra=Decimal("5"))
