"""Shared utilities for fsexplorer."""
