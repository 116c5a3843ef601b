"""Runtime components: REST execution and cursor pagination."""
