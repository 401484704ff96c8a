"""Package Express calculator version."""

VERSION = "2026.10.19"
