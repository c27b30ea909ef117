"""Childcare admin package.

This package is organized by feature modules (programs, families, enrollments,
dashboard, reports, ...) with a thin Flask JSON controller layer over
service/repository layers.
"""
