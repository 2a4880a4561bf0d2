"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

ISO_DATE_FORMAT = "%Y-%m-%d"
DEFAULT_SHELL_DATE_FORMAT = "%m/%d/%Y"
DEFAULT_APPROVERS = ("manager",)
FIRST_REQUEST_ID = 1
