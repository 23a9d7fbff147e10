"""Service layer: catalog, composer, resolver, and the CLI-facing facade."""
