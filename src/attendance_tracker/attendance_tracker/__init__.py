"""Lecture attendance tracker package.

This package is organized by feature modules (users, lectures, attendance, reports)
with a thin Flask controller layer over service/repository layers.
"""
