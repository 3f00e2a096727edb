"""Blog GraphQL API."""
