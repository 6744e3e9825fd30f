"""Cash-flow dashboard aggregation engine."""
