"""Hosts that connect the engine to concrete input and output surfaces."""
