"""Attendance Dashboard package.

This package is organized by feature modules (attendance, regularization,
geolocation, ...) with thin dashboard controllers on top of a session state
machine and HTTP-backed repositories.
"""
