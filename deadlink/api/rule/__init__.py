"""no-dead-link rule: URI extraction and liveness checks."""
