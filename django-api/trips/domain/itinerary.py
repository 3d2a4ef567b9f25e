from collections.abc import Iterable
from datetime import date, tzinfo

from trips.domain.models import Activity, ActivityDay


def group_activities_by_day(
    activities: Iterable[Activity], tz: tzinfo | None = None
) -> list[ActivityDay]:
    """Group activities by the calendar date they occur on.

    Aware timestamps are converted to ``tz`` before taking the date, so the
    grouping follows local days rather than UTC days. Days are returned in
    ascending order and activities within a day by ascending time.
    """
    days: dict[date, list[Activity]] = {}
    for activity in sorted(activities, key=lambda a: a.occurs_at):
        occurs_at = activity.occurs_at
        if tz is not None and occurs_at.tzinfo is not None:
            occurs_at = occurs_at.astimezone(tz)
        days.setdefault(occurs_at.date(), []).append(activity)

    return [
        ActivityDay(date=day, activities=tuple(items))
        for day, items in sorted(days.items())
    ]
