from calendar_system import GregorianCalendar

WEEKDAYS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def english_calendar(first_weekday: int = 1) -> GregorianCalendar:
    return GregorianCalendar(first_weekday, weekday_names=WEEKDAYS, month_names=MONTHS)
