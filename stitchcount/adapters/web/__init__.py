"""Browser surface: HTTP server, request receiver and the counter page."""
