"""Resource groups exposed on the client."""

from .dlq import DeadLetterQueue
from .events import Events
from .llm import Llm
from .messages import Messages
from .queues import Queues
from .schedules import Schedules
from .signing_keys import SigningKeys
from .url_groups import UrlGroups

__all__ = [
    "DeadLetterQueue",
    "Events",
    "Llm",
    "Messages",
    "Queues",
    "Schedules",
    "SigningKeys",
    "UrlGroups",
]
