"""Adapter package for concrete port implementations.

Purpose:
    Collect implementations of the login, main-queue and clock ports used by
    use cases and view models (test doubles included).

Dependencies:
    Submodules depend on the domain protocol definitions and on
    ``concurrent.futures`` for the executor-backed login.

Call context:
    Imported by ``loginflow.app.environment`` for wiring and by tests to drive
    time and login outcomes deterministically.
"""
