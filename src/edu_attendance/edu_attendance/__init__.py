"""Educational Attendance Management API package.

Organized by feature modules (students, teachers, sessions, attendance, ...)
with a thin Flask controller layer over service/repository layers.
"""
