"""Core utilities shared by the HRMS API: error taxonomy and logging setup."""
