"""Warehouse Timesheet package.

Organized by feature modules (employees, attendance, payroll) with a thin
Flask controller layer on top of service/repository layers.
"""
