"""Entry model and the read, write and delete operations."""
