"""Platform services (logging) used across pathext."""
