"""Selector state machine, terminal session, and picker composition."""
