"""Routes de l'API JSON OsService."""
