"""Core exceptions, interfaces and component wiring."""
