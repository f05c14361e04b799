"""Per-cluster OpenShift shell environments."""

__version__ = "0.1.0"
