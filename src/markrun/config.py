"""Runner configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RunnerSettings(BaseSettings):
    """Settings for a markrun run.

    Loads from environment variables automatically:
        MARKRUN_SHOW_TRACEBACK, MARKRUN_NO_COLOR

    Or pass values directly to RunnerSettings().
    """

    show_traceback: bool = Field(
        default=False, description="Attach the traceback when logging a failed test method"
    )
    no_color: bool = Field(default=False, description="Disable colors in the console report")

    model_config = SettingsConfigDict(
        extra="forbid",
        env_prefix="MARKRUN_",
    )
