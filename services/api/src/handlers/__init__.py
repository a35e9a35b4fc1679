"""Request handlers: validate query parameters, fetch upstream, normalize, return a JSON payload."""
