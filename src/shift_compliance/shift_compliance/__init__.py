"""Shift Compliance package.

Turns raw time-clock punches and planned shifts into timesheet totals and
labor-law compliance violations. Organized by feature modules (timeclock,
timesheets, compliance, ...) with a thin Flask controller layer on top of
pure calculation services.
"""
