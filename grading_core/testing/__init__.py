"""Test helpers for grading_core."""
