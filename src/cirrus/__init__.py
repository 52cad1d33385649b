"""Startup authentication and capability bootstrap for the cirrus CLI."""
