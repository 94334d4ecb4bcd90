"""Application layer for the CEP temperature services."""
