"""Runnable experiments, summary metrics and plots."""
