"""Vector space model document search."""
