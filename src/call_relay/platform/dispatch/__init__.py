"""Call dispatch platform module.

Routes an incoming-call notification to a single recipient, a broadcast
topic or a set of registered destinations, and accounts for the outcome.
"""
