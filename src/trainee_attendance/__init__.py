"""Trainee Attendance package.

Organized by feature modules (attendance, schedules, users) with plain
service/repository layers. Persistence, clock, schedule and message lookup are
collaborators injected through small Protocols.
"""
