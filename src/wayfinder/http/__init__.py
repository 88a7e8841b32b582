"""HTTP-facing values: HRRI encoding and the executor's response types."""
