"""Infrastructure layer: persistence, HTTP routers and wiring."""
