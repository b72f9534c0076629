"""HTTP API for the enhancement estimator."""
