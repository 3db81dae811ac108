"""Experiment deployment targets."""
