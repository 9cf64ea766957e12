"""Schedule generation configuration models for the lineup package."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class ScheduleConfig(BaseModel):
    """Configuration for schedule generation and output.

    Parameters
    ----------
    group_size : int
        Participants per group.
    timeout : float
        Seconds to search before giving up.
    max_attempts : int | None
        Maximum candidates to draw. None means bounded only by the timeout.
    random_seed : int | None
        Random seed for reproducibility.
    header : str
        Header line for each group; `{index}` is the 1-based group number.
    indent : int
        Spaces before each participant line.

    Examples
    --------
    >>> config = ScheduleConfig()
    >>> config.group_size
    5
    >>> config.timeout
    5.0
    """

    group_size: int = Field(default=5, gt=0, description="Participants per group")
    timeout: float = Field(default=5.0, gt=0, description="Search timeout (seconds)")
    max_attempts: int | None = Field(
        default=None, ge=1, description="Maximum candidates to draw"
    )
    random_seed: int | None = Field(default=None, description="Random seed")
    header: str = Field(default="round {index}", description="Group header template")
    indent: int = Field(default=4, ge=0, description="Participant line indent")

    @field_validator("header")
    @classmethod
    def validate_header(cls, v: str) -> str:
        """Validate header is non-empty and formats with an index.

        Parameters
        ----------
        v : str
            Header template.

        Returns
        -------
        str
            Validated header template.

        Raises
        ------
        ValueError
            If header is blank, names a placeholder other than `{index}`,
            or is not a valid format string.
        """
        if not v or not v.strip():
            raise ValueError("header must be non-empty")
        try:
            v.format(index=1)
        except KeyError as e:
            raise ValueError(
                f"header template has unknown placeholder {e} (use {{index}})"
            ) from e
        except (AttributeError, IndexError, TypeError, ValueError) as e:
            raise ValueError(f"header template is invalid: {e}") from e
        return v
