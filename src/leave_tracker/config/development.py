import os

from . import parse_approvers

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Comma-separated approver names, invoked in order on every approval
APPROVERS = parse_approvers(os.getenv("LEAVE_APPROVERS", "manager"))

SHELL_DATE_FORMAT = os.getenv("SHELL_DATE_FORMAT", "%m/%d/%Y")
