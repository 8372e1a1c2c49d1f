"""
Server modules for the Food Map application.

This package contains FastAPI router modules for the locations API and the
map settings endpoints.

Author: Food Map maintainers
Date: 2026-10-19
"""
