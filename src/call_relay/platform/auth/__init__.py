"""Legacy authentication platform module.

Username/secret login for accounts migrated from the previous service, gated
by a per-client rate limit and issuing bearer tokens flagged as legacy.
"""
