"""Site Timeclock package.

Kiosk punch clock and back-office for construction-site crews, organized by
feature modules (employees, sites, punches, reports, ...) with a thin Flask
controller layer over service/repository layers.
"""
