"""Probe entry point - argument handling, configuration, and result output."""
