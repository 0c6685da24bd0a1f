"""Runtime concerns: middleware and observability."""
