"""Call notification payload entity."""

from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class CallNotification:
    """Provider-independent notification payload.

    ``data`` values are always strings, as required by push providers.
    """

    title: str
    body: str
    data: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        non_strings = [key for key, value in self.data.items() if not isinstance(value, str)]
        if non_strings:
            raise TypeError(f"Notification data values must be strings: {', '.join(non_strings)}")
