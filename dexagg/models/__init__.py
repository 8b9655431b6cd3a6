"""Request and response records for the aggregator APIs."""
