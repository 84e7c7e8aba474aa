"""Logging setup for funcmode."""
