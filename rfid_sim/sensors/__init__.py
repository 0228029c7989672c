"""Simulated sensors and the data they carry."""
