"""Utilities for working with validation results."""

from .reporter import ValidationReporter

__all__ = ["ValidationReporter"]
