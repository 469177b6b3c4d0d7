"""Feature packages of musicmeta."""
