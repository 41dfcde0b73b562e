"""Referee, word discovery, move requests, and telemetry."""
