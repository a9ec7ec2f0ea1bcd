"""Destination search pipeline."""
