"""SQLAlchemy models for BoloFlix.

All models are imported here so that ``Base.metadata`` knows about them
before tables are created. If you add a new model, import it in this file.
"""

from boloflix.models.subscription import Subscription

__all__ = [
    "Subscription",
]
