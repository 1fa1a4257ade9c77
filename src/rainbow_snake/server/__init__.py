"""HTTP score service."""
