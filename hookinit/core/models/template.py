"""
Generated file model — what the generator hands to the writer.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratedFile(BaseModel):
    """A rendered config file, not yet on disk.

    Attributes:
        path:      Relative path from project root.
        content:   Full file content.
        overwrite: Whether to overwrite if already exists.
        reason:    Why this file was generated.
    """

    path: str
    content: str
    overwrite: bool = False
    reason: str = ""
