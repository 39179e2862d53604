"""Neo call relay - push notification relay for incoming call alerts.

Keeps a registry of device push tokens keyed by user identity and role and
fans out incoming-call notifications to one, many or all recipients.
"""

from .__version__ import __version__

__all__ = ["__version__"]
