"""Configuration models for dirlist.

``FilterConfig`` is the immutable value handed to the listing engine.
``ListingDefaults`` describes the optional YAML defaults file; explicit
command-line flags take precedence over it.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dirlist.config.exceptions import InvalidSizeError
from dirlist.utils.formatting import parse_size

DEFAULT_LOG_LEVEL = "WARNING"


class FilterConfig(BaseModel):
    """Inclusion rules applied to every entry of a listing.

    A bound set to ``None`` leaves that axis unbounded.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    recursive: Annotated[
        bool,
        Field(description="Descend into subdirectories"),
    ] = False
    include_hidden: Annotated[
        bool,
        Field(description="List entries whose name starts with a dot"),
    ] = False
    min_size: Annotated[
        int | None,
        Field(ge=0, description="Minimum entry size in bytes"),
    ] = None
    max_size: Annotated[
        int | None,
        Field(ge=0, description="Maximum entry size in bytes"),
    ] = None
    max_age_days: Annotated[
        int | None,
        Field(ge=0, description="Maximum age of the last modification in days"),
    ] = None


class ListingDefaults(BaseModel):
    """Defaults loaded from a YAML file.

    Sizes may be written either as magnitude strings (``"10M"``) or as plain
    byte counts.
    """

    model_config = ConfigDict(extra="forbid")

    recursive: bool = False
    include_hidden: bool = False
    min_size: Annotated[int | None, Field(ge=0)] = None
    max_size: Annotated[int | None, Field(ge=0)] = None
    max_age_days: Annotated[int | None, Field(ge=0)] = None
    log_level: Annotated[
        str,
        Field(
            description="Logging level",
            pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        ),
    ] = DEFAULT_LOG_LEVEL

    @field_validator("min_size", "max_size", mode="before")
    @classmethod
    def parse_magnitude(cls, v: object) -> object:
        """Convert magnitude strings to byte counts.

        Args:
            v: Raw value from the YAML document

        Returns:
            Byte count for strings, the untouched value otherwise

        Raises:
            ValueError: If the string is not a valid magnitude
        """
        if isinstance(v, str):
            try:
                return parse_size(v)
            except InvalidSizeError as e:
                raise ValueError(str(e)) from e
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    def to_filter_config(
        self,
        *,
        recursive: bool = False,
        include_hidden: bool = False,
        min_size: int | None = None,
        max_size: int | None = None,
        max_age_days: int | None = None,
    ) -> FilterConfig:
        """Merge explicit settings over these defaults.

        Boolean switches can only be turned on from the command line, so
        they are OR-ed with the defaults. Bounds given explicitly replace the
        defaults.

        Args:
            recursive: Recursion requested on the command line
            include_hidden: Hidden entries requested on the command line
            min_size: Explicit minimum size in bytes
            max_size: Explicit maximum size in bytes
            max_age_days: Explicit maximum age in days

        Returns:
            Frozen filter configuration

        Raises:
            pydantic.ValidationError: If a merged bound is negative
        """
        return FilterConfig(
            recursive=recursive or self.recursive,
            include_hidden=include_hidden or self.include_hidden,
            min_size=min_size if min_size is not None else self.min_size,
            max_size=max_size if max_size is not None else self.max_size,
            max_age_days=max_age_days if max_age_days is not None else self.max_age_days,
        )
