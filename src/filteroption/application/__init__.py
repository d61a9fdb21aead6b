"""Application layer – list-query filtering and pagination helpers."""
