"""HTTP middleware: request correlation and request logging."""
