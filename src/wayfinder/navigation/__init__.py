"""Navigation — turn a view model or key into a host-relative URI and navigate to it."""
