"""Example: use the service layer without Flask.

Controllers are a thin layer; the business rules live in the services.
"""

import importlib

from config import get_settings_module

from src.site_timeclock.site_timeclock.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings)
    print(container.report_service.dashboard(include_financials=True).to_dict())
    for line in container.report_service.payroll():
        print(line.to_dict())


if __name__ == "__main__":
    main()
