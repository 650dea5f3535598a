"""Generic helpers for observable, persisted Pydantic models.

- **ObserverManager**: observer list with isolated notification
- **PydanticPersistence**: load/save Pydantic models as JSON files
"""

from simonpad.model_manager.observer import ObserverManager
from simonpad.model_manager.persistence import PydanticPersistence

__all__ = [
    "ObserverManager",
    "PydanticPersistence",
]
