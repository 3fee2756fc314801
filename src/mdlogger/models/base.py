"""
Base models and configuration for mdlogger.

This module provides the foundation for all data models using Pydantic v2
with JSON serialization support for the editor-facing payloads.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class BaseMdloggerModel(BaseModel):
    """
    Base model for all mdlogger data structures.

    Provides consistent configuration and JSON serialization so that task
    groups and capture results can be posted back to an editor panel as-is.
    """

    model_config = ConfigDict(
        # Enable validation on assignment
        validate_assignment=True,
        # Computed fields are echoed back by panels, ignore them on input
        extra="ignore",
        # Validate default values
        validate_default=True,
    )

    def model_dump_payload(self) -> dict[str, Any]:
        """
        Serialize model for a panel message payload.

        Returns a dictionary that can be safely serialized to JSON.
        """
        return self.model_dump(
            mode="json",
            exclude_none=True,
            by_alias=True,
        )
