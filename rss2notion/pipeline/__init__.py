"""Sync pipeline."""

from .orchestrator import SyncJob, SyncReport, SyncStep, print_summary

__all__ = ["SyncJob", "SyncReport", "SyncStep", "print_summary"]
