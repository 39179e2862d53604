"""Relay platform modules: recipient registry, call dispatch and legacy auth."""
