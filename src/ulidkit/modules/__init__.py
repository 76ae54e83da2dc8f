"""Feature modules built on the core codec."""
