"""Application layer – use-case level components."""
