import random
from datetime import datetime
from typing import Dict, Any, Optional, Callable


class BaseAnalyzer:
    """Base class for all analysis components."""

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize with configuration options.

        Args:
            config: Optional per-instance configuration
            rng: Random source; seed it to make results reproducible
            clock: Callable returning the current time (used for seasonal tables)
        """
        self.config = config or {}
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock or datetime.now

    def current_month(self) -> int:
        """Zero-based calendar month (0 = January)."""
        return self.clock().month - 1
