"""Analysis pipeline: stats, loading, aggregation and dispatch."""
