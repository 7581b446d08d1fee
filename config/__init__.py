"""Configuration loading for the Hold'em simulator."""
