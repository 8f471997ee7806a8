"""Use-case layer between view models and login adapters.

Each module coordinates domain objects and ports without touching UI state,
preserving MVVM + Hexagonal boundaries.
"""
