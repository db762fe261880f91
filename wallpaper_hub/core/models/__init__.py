"""API-facing models that are independent of the database entities."""
