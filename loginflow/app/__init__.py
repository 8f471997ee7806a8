"""Composition root: environments that wire ports into view models."""
