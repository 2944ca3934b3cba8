"""Bus trip catalog: trip data model, name/route search and Lambda handlers."""
