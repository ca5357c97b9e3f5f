"""Go-to-definition language server for Sentry docs MDX tags."""
