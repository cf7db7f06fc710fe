"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every resource uses (DB handle,
error classification, query-parameter validation, SQL composition).
Resource-specific SQL and rules live in the resource package
(e.g. `articles/`).
"""
