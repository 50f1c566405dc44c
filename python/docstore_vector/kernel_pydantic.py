# Copyright (c) Microsoft. All rights reserved.


from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict


class KernelBaseModel(BaseModel):
    """Base class for all pydantic models in the package."""

    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=True,
        validate_assignment=True,
    )


T = TypeVar("T", bound="KernelBaseSettings")


class KernelBaseSettings(BaseSettings):
    """Base class for all settings classes in the package.

    A subclass sets `env_prefix` and declares its fields; values are read from environment variables
    with that prefix, then from an optional .env file. Values passed to `create` take precedence.
    """

    env_prefix: ClassVar[str] = ""

    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
    )

    def __init__(
        self,
        env_file_path: str | None = None,
        env_file_encoding: str | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize the settings class."""
        # Remove any None values from the kwargs so that defaults are used.
        kwargs = {k: v for k, v in kwargs.items() if v is not None}
        super().__init__(
            _env_prefix=type(self).env_prefix,
            _env_file=env_file_path,
            _env_file_encoding=env_file_encoding or "utf-8",
            **kwargs,
        )

    @classmethod
    def create(cls: type[T], **data: Any) -> T:
        """Create the settings, reading the environment and the optional .env file."""
        return cls(**data)
