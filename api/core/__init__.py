"""
Shared, cross-cutting code for the API.

`core/` holds the building blocks every content package uses: settings,
logging, the DB pool, the document store, error handlers and response
envelopes, plus the upload-service and mail clients. Entity-specific filters
and business rules live in the entity packages (e.g. `venues/`).
"""
