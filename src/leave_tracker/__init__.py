"""Leave Tracker package.

This package is organized by feature modules (employees, leaves) with
service/repository layers, a thin Flask controller layer and a console shell.
"""
