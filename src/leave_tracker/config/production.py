import os

from . import parse_approvers

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

APPROVERS = parse_approvers(os.getenv("LEAVE_APPROVERS", "manager"))

SHELL_DATE_FORMAT = os.getenv("SHELL_DATE_FORMAT", "%m/%d/%Y")
