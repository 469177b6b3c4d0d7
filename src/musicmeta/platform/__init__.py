"""Platform adapters shared by every feature."""
