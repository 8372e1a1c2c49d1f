"""
Food Map application.

A FastAPI-powered catalogue of company-favourite food spots, with the list
filtering and map selection logic used by the map page.

Author: Food Map maintainers
Date: 2026-10-19
"""
