"""Path search over `timegraph.model.Graph`."""
