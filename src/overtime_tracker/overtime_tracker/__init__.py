"""Overtime Pay Tracker package.

This package is organized by feature modules (payroll, records, dashboard, ...)
with a thin Flask controller layer and service/repository layers.
"""
