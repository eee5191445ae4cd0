"""Adapters around archives and external executables."""
