"""URL helpers: pathnames, query strings, routes and URL extraction."""
