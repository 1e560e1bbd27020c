"""
Shared, cross-cutting code for the API.

`core/` holds the building blocks every route uses: settings, logging, the
error taxonomy, pagination, the question/answer value types and the store.
Route handlers live in the feature packages (`questions/`, `answers/`).
"""
