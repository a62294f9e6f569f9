"""Logging setup for faasreport."""
