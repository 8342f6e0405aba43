"""Common type definitions for the orderflow library."""

from typing import TypeVar

from pydantic import BaseModel

# Type variable for aggregate state
TState = TypeVar("TState", bound=BaseModel)
