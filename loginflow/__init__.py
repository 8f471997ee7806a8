"""Login form and onboarding carousel view models with injectable ports."""

__version__ = "0.1.0"
