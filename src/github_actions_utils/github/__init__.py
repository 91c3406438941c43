"""GitHub reference parsing and raw-content retrieval."""
