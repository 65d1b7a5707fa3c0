"""Lantern HTTP API package."""
