SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

APPROVERS = ("manager",)

SHELL_DATE_FORMAT = "%m/%d/%Y"
