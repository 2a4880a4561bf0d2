from __future__ import annotations

from dotenv import load_dotenv

from .container import build_container, load_settings
from .logging_config import setup_logging
from .shell import LeaveShell


def main() -> None:
    load_dotenv(override=False)
    settings = load_settings()
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(approver_names=getattr(settings, "APPROVERS", ("manager",)))
    LeaveShell(
        container.registry,
        date_format=getattr(settings, "SHELL_DATE_FORMAT", "%m/%d/%Y"),
    ).run()


if __name__ == "__main__":
    main()
