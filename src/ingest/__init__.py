"""Pixel ingestion.

This module reads pixel text sources into typed records.
It also hosts the end-to-end flip pipeline runner.
"""
