"""
Shared, cross-cutting code for the API.

`core/` holds small building blocks that features use (DB wiring, settings,
logging, id generation). Keep feature-specific SQL and business logic
in the corresponding feature package (e.g. `posts/`).
"""
