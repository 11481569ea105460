"""Timekeeper package.

Turns a raw monthly punch sheet (a matrix of string cells exported from the
time clock) into per-employee, per-day attendance records. Organized by
feature modules with a thin Flask controller layer on top of pure services.
"""
