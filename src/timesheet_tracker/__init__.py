"""Timesheet Tracker package.

Feature modules (clock, ranges, timelogs, progress, status, absence) hold the
time arithmetic and aggregation rules behind the daily report and month
history screens. A thin Flask controller layer exposes them as JSON.
"""
