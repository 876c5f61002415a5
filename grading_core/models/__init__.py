"""Data models for grading metadata, outcomes and reports."""
