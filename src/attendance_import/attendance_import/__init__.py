"""Attendance Import package.

Turns time-clock export files (CSV/Excel) into per-day attendance records.
Organized by feature modules (employees, attendance, imports, ...) with
Protocol repositories, strategy-based classification and a thin CLI.
"""
