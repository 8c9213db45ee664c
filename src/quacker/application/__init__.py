from .projection import (
    Projection,
    when,
)

__all__ = ["Projection", "when"]
