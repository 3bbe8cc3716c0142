"""Clipboard reading strategies."""
