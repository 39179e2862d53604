"""Core building blocks shared by all relay platform modules."""
