"""Application layer: validators, services and reporters."""
