"""Curve subgraph REST connector."""
