"""Configuration loading and derived settings for pathext."""
