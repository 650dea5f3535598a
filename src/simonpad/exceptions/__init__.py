"""
Custom exception hierarchy for SimonPad.

## Exception Hierarchy

```
SimonPadError (base)
├── AudioError
│   ├── AudioBackendUnavailableError
│   └── SampleLoadError
├── StorageError
│   └── ScoreStorageError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

Game logic itself never raises: input that does not fit the current round
state is ignored. These exceptions cover the resources around the game
(audio, storage, configuration) and are mostly caught where the resource
is used, so the game degrades instead of stopping.

See `simonpad.exceptions.handlers` for utilities to handle these
exceptions systematically.
"""

from .audio import AudioBackendUnavailableError, AudioError, SampleLoadError
from .base import SimonPadError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import (
    ErrorCollector,
    collect_errors,
    format_error_for_display,
    handle_errors,
    wrap_pydantic_error,
)
from .storage import ScoreStorageError, StorageError

__all__ = [
    # Base
    "SimonPadError",
    # Audio
    "AudioBackendUnavailableError",
    "AudioError",
    "SampleLoadError",
    # Storage
    "ScoreStorageError",
    "StorageError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Handlers
    "ErrorCollector",
    "collect_errors",
    "format_error_for_display",
    "handle_errors",
    "wrap_pydantic_error",
]
