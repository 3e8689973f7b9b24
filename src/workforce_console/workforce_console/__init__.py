"""Workforce operations console package.

This package is organized by feature modules (attendance, identity, reports,
users, ...) with a thin Flask controller layer over service/repository layers.
"""
