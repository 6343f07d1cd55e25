"""Forum API: threads, comments and replies behind token authentication."""
