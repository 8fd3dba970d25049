"""
Core package for the score dashboard application.

Submodules provide score acquisition, range filtering, aggregation, and user
interface rendering helpers that are orchestrated by the top-level `app.py`.
"""
