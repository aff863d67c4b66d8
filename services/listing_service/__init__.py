"""Listing Store service: owns listing records keyed by their owner's user id."""
