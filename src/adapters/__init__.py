"""Adaptadores de I/O: transporte HTTP, envelope, recursos y exportadores."""
