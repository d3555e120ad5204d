"""HTTP layer: application factory, routes, middleware and schemas."""
