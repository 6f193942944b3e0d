"""Maintenance window planning for remediated equipment anomalies."""

__version__ = "1.0.0"
