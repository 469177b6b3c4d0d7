"""User interfaces for musicmeta."""
