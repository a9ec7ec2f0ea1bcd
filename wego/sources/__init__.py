"""Remote data sources: photo search and topic summaries."""
