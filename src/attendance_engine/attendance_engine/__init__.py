"""Attendance engine package.

Shift matching and attendance status classification for the HR backend,
organized by feature modules (shifts, attendance) with a thin Flask
controller layer over service/repository layers.
"""
