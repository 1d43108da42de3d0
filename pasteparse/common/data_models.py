"""Pydantic base model for extracted records.

Every record the extractors produce derives from ExtractedData. Records are
frozen: they are assembled in a single pass and never mutated afterwards,
and they hold no reference to the lxml tree they came from.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ExtractedData(BaseModel):
    """Base class for immutable extracted records.

    Example:
        user = SimpleUser(username="alice", registered=True, pro=False, icon_url="")
        user.model_dump_json()  # '{"username":"alice",...}'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    def to_json_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible dict (tuples become lists)."""
        return self.model_dump(mode="json")
