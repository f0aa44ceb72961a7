"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

WARNING_THRESHOLD_DAYS = 45
CERTIFICATE_VALIDITY_YEARS = 1
TOP_CHART_LIMIT = 10

DISPLAY_DATE_FORMAT = "%d/%m/%Y"
DISPLAY_TIME_FORMAT = "%H:%M"
DISPLAY_DATETIME_FORMAT = "%d/%m/%Y %H:%M"

DETAILED_EXPORT_FILENAME = "gym_log_detailed.csv"
SUMMARY_EXPORT_FILENAME = "gym_report_summary.csv"
