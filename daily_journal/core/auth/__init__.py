"""Authentication helpers: session resolution and token issuance."""
