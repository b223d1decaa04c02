"""Application setup (config, logging, tracing, wiring)."""
