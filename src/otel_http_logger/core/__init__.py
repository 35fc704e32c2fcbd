"""Core domain: identifiers, log records and the contextual logger."""
