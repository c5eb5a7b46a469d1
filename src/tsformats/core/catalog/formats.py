"""Timestamp format definitions.

Each entry pairs an anchored pattern with one literal example it is meant to
match. Numeric fields are range-bounded so that distinct real-world formats
only collide where their shapes are genuinely identical.
"""

from ..types import FormatCategory as C
from .pattern_registry import FormatSpec, _f

# Shared fragments
_MONTH = r"(0[1-9]|1[0-2])"
_DAY = r"(0[1-9]|[12]\d|3[01])"
_MONTH_LOOSE = r"(0?[1-9]|1[0-2])"
_DAY_LOOSE = r"(0?[1-9]|[12]\d|3[01])"
_HOUR = r"([01]\d|2[0-3])"
_HOUR_12 = r"(0?[1-9]|1[0-2])"
_HMS = _HOUR + r":[0-5]\d:[0-5]\d"
_YMD = r"\d{4}-" + _MONTH + "-" + _DAY
_ORDINAL_DAY = r"(00[1-9]|0[1-9]\d|[1-2]\d\d|3[0-5]\d|36[0-6])"
_ISO_WEEK = r"(0[1-9]|[1-4]\d|5[0-3])"
_OFFSET = r"[+-]([01]\d|2[0-3]):[0-5]\d"
_MON = r"(Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)"
_MON_UPPER = r"(JAN|FEB|MAR|APR|MAY|JUN|JUL|AUG|SEP|OCT|NOV|DEC)"
_WEEKDAY = r"(Mon|Tue|Wed|Thu|Fri|Sat|Sun)"
_WEEKDAY_FULL = r"(Monday|Tuesday|Wednesday|Thursday|Friday|Saturday|Sunday)"
_SAKA_MONTH = (
    r"(Chaitra|Vaisakha|Jyaishtha|Ashadha|Sravana|Bhadra|Asvina|Kartika|"
    r"Agrahayana|Pausha|Magha|Phalguna)"
)

TIMESTAMP_FORMATS: tuple[FormatSpec, ...] = (
    # --- ISO 8601 ---
    _f("ISO_DATE", C.ISO8601, rf"^{_YMD}$", "2025-05-19"),
    _f("ISO_DATETIME", C.ISO8601, rf"^{_YMD}T{_HMS}$", "2025-05-19T14:30:15"),
    _f("ISO_DATETIME_UTC", C.ISO8601, rf"^{_YMD}T{_HMS}(?:Z|UTC)$", "2025-05-19T14:30:15UTC"),
    _f("ISO_DATETIME_TZ", C.ISO8601, rf"^{_YMD}T{_HMS}{_OFFSET}$", "2025-05-19T14:30:15+02:00"),
    _f("ISO_DATETIME_MS", C.ISO8601, rf"^{_YMD}T{_HMS}\.\d{{1,9}}$", "2025-05-19T14:30:15.123"),
    _f(
        "ISO_DATETIME_MS_UTC", C.ISO8601,
        rf"^{_YMD}T{_HMS}\.\d{{1,9}}(?:Z|UTC)$", "2025-05-19T14:30:15.123UTC",
    ),
    _f("ISO_DATE_BASIC", C.ISO8601, rf"^\d{{4}}{_MONTH}{_DAY}$", "20250519"),
    _f(
        "ISO_DATETIME_BASIC", C.ISO8601,
        rf"^\d{{4}}{_MONTH}{_DAY}T{_HOUR}[0-5]\d[0-5]\d$", "20250519T143015",
    ),
    _f("ISO_ORDINAL_DATE", C.ISO8601, rf"^\d{{4}}-{_ORDINAL_DAY}$", "2025-139"),
    _f("ISO_WEEK_DATE", C.ISO8601, rf"^\d{{4}}-W{_ISO_WEEK}-[1-7]$", "2025-W21-1"),

    # --- Unix / epoch ---
    _f("UNIX_SECONDS", C.UNIX_EPOCH, r"^[1-9]\d{9}$", "1716159600"),
    _f("UNIX_MILLISECONDS", C.UNIX_EPOCH, r"^[1-9]\d{12}$", "1716159600000"),
    _f("UNIX_MICROSECONDS", C.UNIX_EPOCH, r"^[1-9]\d{15}$", "1716159600000000"),
    _f("UNIX_NANOSECONDS", C.UNIX_EPOCH, r"^[1-9]\d{18}$", "1716159600000000000"),

    # --- RFC standards ---
    _f(
        "RFC_822_1123", C.RFC,
        rf"^{_WEEKDAY}, {_DAY} {_MON} \d{{4}} {_HMS} GMT$",
        "Mon, 19 May 2025 14:30:15 GMT",
    ),
    _f(
        "RFC_850_1036", C.RFC,
        rf"^{_WEEKDAY_FULL}, {_DAY}-{_MON}-\d{{2}} {_HMS} GMT$",
        "Monday, 19-May-25 14:30:15 GMT",
    ),
    # asctime pads single-digit days with a space: "May  9"
    _f(
        "ANSI_C_ASCTIME", C.RFC,
        rf"^{_WEEKDAY} {_MON} ( ?[1-9]|[12]\d|3[01]) {_HMS} \d{{4}}$",
        "Mon May 19 14:30:15 2025",
    ),
    _f("RFC_3339", C.RFC, rf"^{_YMD}T{_HMS}(?:{_OFFSET}|Z)$", "2025-05-19T14:30:15Z"),

    # --- Regional and localized ---
    _f(
        "US_DATETIME", C.REGIONAL,
        rf"^{_MONTH_LOOSE}/{_DAY_LOOSE}/\d{{4}} {_HMS}$", "05/19/2025 14:30:15",
    ),
    _f(
        "EU_DATETIME", C.REGIONAL,
        rf"^{_DAY_LOOSE}/{_MONTH_LOOSE}/\d{{4}} {_HMS}$", "19/05/2025 14:30:15",
    ),
    _f(
        "ASIAN_DATETIME", C.REGIONAL,
        rf"^\d{{4}}/{_MONTH_LOOSE}/{_DAY_LOOSE} {_HMS}$", "2025/05/19 14:30:15",
    ),
    _f(
        "GERMAN_DATETIME", C.REGIONAL,
        rf"^{_DAY_LOOSE}\.{_MONTH_LOOSE}\.\d{{4}} {_HMS}$", "19.05.2025 14:30:15",
    ),
    _f(
        "UK_DATETIME", C.REGIONAL,
        rf"^{_DAY_LOOSE}-{_MON}-\d{{4}} {_HMS}$", "19-May-2025 14:30:15",
    ),
    _f(
        "SHORT_EU_DATETIME", C.REGIONAL,
        rf"^{_DAY_LOOSE}-{_MONTH_LOOSE}-\d{{2}} {_HMS}$", "19-05-25 14:30:15",
    ),
    _f(
        "SHORT_US_DATETIME", C.REGIONAL,
        rf"^{_MONTH_LOOSE}-{_DAY_LOOSE}-\d{{2}} {_HMS}$", "05-19-25 14:30:15",
    ),
    _f(
        "TIME_LEADING_FORMAT", C.REGIONAL,
        rf"^{_HMS} {_DAY_LOOSE}/{_MONTH_LOOSE}/\d{{4}}$", "14:30:15 19/05/2025",
    ),

    # --- Times of day ---
    _f("TIME_24H", C.TIME, rf"^{_HMS}$", "14:30:15"),
    _f("TIME_24H_MS", C.TIME, rf"^{_HMS}\.\d{{1,3}}$", "14:30:15.123"),
    _f("TIME_12H", C.TIME, rf"^{_HOUR_12}:[0-5]\d:[0-5]\d [AP]M$", "02:30:15 PM"),
    _f("TIME_12H_SHORT", C.TIME, rf"^{_HOUR_12}:[0-5]\d [AP]M$", "2:30 PM"),
    _f("TIME_CONTINUOUS_MS", C.TIME, rf"^{_HOUR}[0-5]\d[0-5]\d\d{{3}}$", "143015123"),
    _f("TIME_MILITARY", C.TIME, rf"^{_HOUR}[0-5]\d[0-5]\d$", "143015"),

    # --- Database timestamps ---
    _f("SQL_TIMESTAMP", C.DATABASE, rf"^{_YMD} {_HMS}$", "2025-05-19 14:30:15"),
    _f(
        "SQL_TIMESTAMP_MS", C.DATABASE,
        rf"^{_YMD} {_HMS}\.\d{{1,6}}$", "2025-05-19 14:30:15.123456",
    ),
    _f(
        "ORACLE_TIMESTAMP", C.DATABASE,
        rf"^{_DAY_LOOSE}-{_MON_UPPER}-\d{{2}} {_HOUR_12}\.[0-5]\d\.[0-5]\d\.\d{{1,4}} [AP]M$",
        "19-MAY-25 02.30.15.1234 PM",
    ),
    _f(
        "DB2_TIMESTAMP", C.DATABASE,
        rf"^{_YMD}-{_HOUR}\.[0-5]\d\.[0-5]\d\.\d{{1,6}}$", "2025-05-19-14.30.15.123456",
    ),
    _f(
        "MSSQL_TIMESTAMP", C.DATABASE,
        rf"^\d{{4}}{_MONTH}{_DAY} {_HMS}$", "20250519 14:30:15",
    ),

    # --- Programming language / system specific ---
    _f(
        "COMPACT_TIMESTAMP", C.SYSTEM,
        rf"^\d{{4}}{_MONTH}{_DAY}{_HOUR}[0-5]\d[0-5]\d\d{{1,3}}$", "202505191430151",
    ),
    _f(
        "POSTGRES_TIMESTAMP_TZ", C.SYSTEM,
        rf"^{_YMD} {_HMS}\.\d{{1,6}}{_OFFSET}$", "2025-05-19 14:30:15.123456+02:00",
    ),
    _f("TAGGED_UNIX", C.SYSTEM, r"^@[1-9]\d{9}$", "@1716159600"),
    _f("SHORT_DATE", C.SYSTEM, rf"^\d{{2}}-{_MONTH}-{_DAY}$", "25-05-19"),
    _f(
        "SAS_DATETIME", C.SYSTEM,
        rf"^{_DAY_LOOSE}{_MON_UPPER}\d{{4}}:{_HMS}$", "19MAY2025:14:30:15",
    ),
    _f(
        "DOTNET_DATETIME", C.SYSTEM,
        rf"^{_MONTH_LOOSE}/{_DAY_LOOSE}/\d{{4}} {_HOUR_12}:[0-5]\d:[0-5]\d [AP]M$",
        "5/19/2025 2:30:15 PM",
    ),

    # --- Legacy and specialized ---
    _f(
        "HYPHEN_SEPARATED", C.LEGACY,
        rf"^{_YMD}-{_HOUR}-[0-5]\d-[0-5]\d$", "2025-05-19-14-30-15",
    ),
    _f(
        "CONTINUOUS_DATETIME", C.LEGACY,
        rf"^\d{{4}}{_MONTH}{_DAY}{_HOUR}[0-5]\d[0-5]\d$", "20250519143015",
    ),
    _f("NASA_MISSION", C.LEGACY, rf"^\d{{2}}\.{_ORDINAL_DAY}/{_HMS}$", "25.139/14:30:15"),
    _f(
        "EXIF_DATETIME", C.LEGACY,
        rf"^\d{{4}}:{_MONTH}:{_DAY} {_HMS}$", "2025:05:19 14:30:15",
    ),
    _f("JULIAN_DATE", C.LEGACY, r"^24\d{5}\.\d{1,5}$", "2460815.5"),
    _f("MODIFIED_JULIAN_DATE", C.LEGACY, r"^[5-6]\d{4}\.\d{1,5}$", "60814.5"),
    _f("ORDINAL_DATE_SHORT", C.LEGACY, rf"^\d{{2}}{_ORDINAL_DAY}$", "25139"),
    _f("IBM_MAINFRAME", C.LEGACY, r"^[1-2]\d{16}$", "12345678901234567"),

    # --- Industry specific ---
    _f(
        "AVIATION_METAR", C.INDUSTRY,
        rf"^{_DAY}{_HOUR}[0-5]\dZ {_MON_UPPER} \d{{2}}$", "191430Z MAY 25",
    ),
    _f(
        "BROADCAST_TIMECODE", C.INDUSTRY,
        rf"^{_ORDINAL_DAY}:{_HMS}:[0-5]\d$", "139:14:30:15:12",
    ),
    _f("SMPTE_TIMECODE", C.INDUSTRY, rf"^{_HMS}:([0-2]\d|3[0-9])$", "14:30:15:24"),
    _f("ISO_WEEK", C.INDUSTRY, rf"^\d{{4}}-W{_ISO_WEEK}$", "2025-W21"),
    _f("ALT_ISO_WEEK", C.INDUSTRY, rf"^W{_ISO_WEEK}-\d{{4}}$", "W21-2025"),
    _f("JULIAN_SHORT", C.INDUSTRY, rf"^\d{{2}}{_ORDINAL_DAY}$", "25139"),
    _f(
        "AVIATION_MIXED", C.INDUSTRY,
        rf"^{_HOUR}[0-5]\dUTC{_MON}{_DAY}$", "1430UTCMay19",
    ),

    # --- Timezone representations ---
    _f(
        "ZULU_INDICATOR", C.TIMEZONE,
        rf"^{_YMD}T{_HMS}(?:\.\d{{1,9}})?Z$", "2025-05-19T14:30:15.123Z",
    ),
    _f(
        "ISO_TZ_OFFSET", C.TIMEZONE,
        rf"^{_YMD}T{_HMS}(?:\.\d{{1,9}})?{_OFFSET}$", "2025-05-19T14:30:15.123+02:00",
    ),
    _f(
        "COMPACT_TZ_OFFSET", C.TIMEZONE,
        rf"^{_YMD}T{_HMS}(?:\.\d{{1,9}})?[+-]{_HOUR}[0-5]\d$", "2025-05-19T14:30:15+0200",
    ),
    _f(
        "GMT_OFFSET", C.TIMEZONE,
        rf"^{_YMD} {_HMS} GMT{_OFFSET}$", "2025-05-19 14:30:15 GMT+02:00",
    ),
    _f(
        "NAMED_TIMEZONE", C.TIMEZONE,
        rf"^{_YMD} {_HMS} [A-Z]{{3,5}}$", "2025-05-19 14:30:15 CEST",
    ),
    _f(
        "IANA_TIMEZONE", C.TIMEZONE,
        rf"^{_YMD} {_HMS} [A-Za-z]+/[A-Za-z_]+$", "2025-05-19 14:30:15 Europe/Paris",
    ),
    _f(
        "SIMPLE_UTC_OFFSET", C.TIMEZONE,
        rf"^{_YMD} {_HMS} UTC[+-]([01]?\d|2[0-3])$", "2025-05-19 14:30:15 UTC+2",
    ),

    # --- Special considerations ---
    _f(
        "JAVA8_DATETIME", C.SPECIAL,
        rf"^{_YMD}T{_HMS}\.\d{{1,3}}{_OFFSET}\[[A-Za-z_/]+\]$",
        "2025-05-19T14:30:15.123+02:00[Europe/Paris]",
    ),
    _f("SIGNED_UNIX", C.SPECIAL, r"^[+-][1-9]\d{9}$", "+1716159600"),
    _f(
        "HYBRID_TIMESTAMP", C.SPECIAL,
        rf"^@[1-9]\d{{12}}/{_YMD}$", "@1716159600000/2025-05-19",
    ),
    _f("W3C_DTF", C.SPECIAL, rf"^{_YMD}T{_HMS}{_OFFSET}$", "2025-05-19T14:30:15+02:00"),
    _f("XML_TIMESTAMP", C.SPECIAL, r"^<[1-9]\d{9}>$", "<1716159600>"),
    _f("ISO_WEEK_WEEKDAY", C.SPECIAL, rf"^\d{{4}}\.{_ISO_WEEK}\.[1-7]$", "2025.21.1"),
    _f(
        "CUSTOM_EPOCH", C.SPECIAL,
        r"^(?:[1-9]\d{9}|[1-9]\d{12}|[1-9]\d{15}|[1-9]\d{18})$", "1716159600",
    ),
    _f(
        "COMPACT_DATETIME", C.SPECIAL,
        rf"^\d{{2}}{_MONTH}{_DAY}-{_HOUR}[0-5]\d[0-5]\d$", "250519-143015",
    ),

    # --- Calendar systems ---
    _f("CHINESE_CALENDAR", C.CALENDAR, r"^[\u4E00-\u9FFF年月日]+$", "二零二五年五月十九日"),
    _f(
        "ISLAMIC_CALENDAR", C.CALENDAR,
        rf"^1[3-5]\d{{2}}-{_MONTH}-(0[1-9]|[12]\d|30)$", "1446-11-21",
    ),
    _f(
        "HEBREW_CALENDAR", C.CALENDAR,
        rf"^5[7-8]\d{{2}}-{_MONTH}-(0[1-9]|[12]\d|30)$", "5785-02-21",
    ),
    _f(
        "INDIAN_CALENDAR", C.CALENDAR,
        rf"^\d{{4}} {_SAKA_MONTH} (0?[1-9]|[12]\d|3[01])$", "1947 Vaisakha 29",
    ),
    _f("THAI_CALENDAR", C.CALENDAR, rf"^25\d{{2}}-{_MONTH}-{_DAY}$", "2568-05-19"),
    _f(
        "JAPANESE_CALENDAR", C.CALENDAR,
        rf"^(令和|平成|昭和|大正|明治)\d{{1,2}}年{_MONTH_LOOSE}月{_DAY_LOOSE}日$",
        "令和7年5月19日",
    ),
)
