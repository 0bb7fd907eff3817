"""Book API: a CRUD HTTP service for books."""
