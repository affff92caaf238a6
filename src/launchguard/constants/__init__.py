"""Tuning constants for protection, detection and security scoring."""
