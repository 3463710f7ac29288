"""API layer - routers, middleware and dependencies."""
