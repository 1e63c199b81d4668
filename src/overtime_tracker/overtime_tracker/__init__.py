"""Overtime Tracker package.

Organized by feature modules (employees, holidays, overtime, imports, payroll, users)
with a thin Flask JSON controller layer over service/repository layers.
"""
