"""HTTP surface of the call relay.

The application factory lives in ``call_relay.app``.
"""
