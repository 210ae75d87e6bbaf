"""
Configuration data models for deptboard.

These models define the structure of .deptboard.json and
~/.config/deptboard/config.json files, with validation and type safety via
Pydantic.
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LimitsConfig(BaseModel):
    """
    Result caps for list requests.

    The backend is never paged; these are the fixed fetch limits.
    """
    users: int = Field(
        default=100,
        ge=1,
        description="Maximum users fetched per load"
    )
    tasks: int = Field(
        default=100,
        ge=1,
        description="Maximum tasks fetched per load"
    )
    comments: int = Field(
        default=50,
        ge=1,
        description="Maximum comments fetched per load"
    )


class DashboardConfig(BaseModel):
    """
    Dashboard summary settings.

    Controls the urgent window and the size of the urgent list.
    """
    urgent_window_days: int = Field(
        default=7,
        ge=0,
        description="A task due within this many days from now counts as urgent"
    )
    urgent_list_size: int = Field(
        default=5,
        ge=1,
        description="Number of soonest-due tasks shown on the dashboard"
    )


class StaffConfig(BaseModel):
    """
    Staff directory settings.

    The department roster order and the positions rendered as managers.
    """
    priority_names: list[str] = Field(
        default_factory=lambda: ["강연석", "이진중", "이혜진", "소정호"],
        description="Names listed first, in this order, before the alphabetical remainder"
    )
    manager_positions: list[str] = Field(
        default_factory=lambda: ["처장", "과장"],
        description="Positions that get the manager card header"
    )


class DeskConfig(BaseModel):
    """
    Top-level deptboard configuration.

    Loaded from defaults, user config, project config, and env vars.

    Example:
        >>> config = DeskConfig(base_url="https://desk.example.edu")
        >>> config.api_url
        'https://desk.example.edu/tables'
        >>> config.limits.comments
        50
    """
    # Backend location
    base_url: str = Field(
        default="http://localhost:8000",
        description="Scheme and host of the REST backend"
    )
    api_path: str = Field(
        default="tables",
        description="Path prefix under which the resource endpoints live"
    )
    request_timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="Per-request timeout in seconds (None waits indefinitely)"
    )

    limits: LimitsConfig = Field(
        default_factory=LimitsConfig,
        description="List request caps"
    )
    dashboard: DashboardConfig = Field(
        default_factory=DashboardConfig,
        description="Dashboard summary settings"
    )
    staff: StaffConfig = Field(
        default_factory=StaffConfig,
        description="Staff directory settings"
    )

    model_config = ConfigDict(
        extra="allow",  # Allow extra fields for forward compatibility
        validate_assignment=True,
    )

    @field_validator("base_url", mode="before")
    @classmethod
    def strip_base_url(cls, v: Union[str, None]) -> Union[str, None]:
        """Drop trailing slashes so paths join cleanly."""
        if isinstance(v, str):
            return v.rstrip("/")
        return v

    @field_validator("api_path", mode="before")
    @classmethod
    def strip_api_path(cls, v: Union[str, None]) -> Union[str, None]:
        """Normalize the api path to have no surrounding slashes."""
        if isinstance(v, str):
            return v.strip("/")
        return v

    @property
    def api_url(self) -> str:
        """Base URL for resource endpoints."""
        if not self.api_path:
            return self.base_url
        return f"{self.base_url}/{self.api_path}"
