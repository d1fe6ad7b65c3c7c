"""HTTP surface for ABA conversion."""
