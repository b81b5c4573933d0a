"""Cross-cutting infrastructure: config, logging, exceptions, protocols."""
