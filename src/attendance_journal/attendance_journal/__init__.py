"""Attendance Journal package.

Feature modules (users, schedules, attendance, access) each carry a thin Flask
controller layer on top of service/repository layers.
"""
