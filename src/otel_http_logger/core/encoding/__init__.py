"""Wire encoders for log records."""
