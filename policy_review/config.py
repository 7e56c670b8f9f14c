"""Configuration for Bank Policy Review."""

from dataclasses import dataclass
from typing import Optional
import os


OUTPUT_FORMATS = ("text", "markdown")


@dataclass
class ReviewConfig:
    """Configuration for the policy review report."""

    # Output
    output_format: str = "text"  # text, markdown
    show_code: bool = True       # Include code snippets in detailed violations

    # Logging
    debug: bool = False

    def __post_init__(self):
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output format '{self.output_format}'. "
                f"Expected one of: {', '.join(OUTPUT_FORMATS)}"
            )

    @classmethod
    def from_env(cls, output_format: Optional[str] = None) -> "ReviewConfig":
        """
        Create config from environment variables.

        Args:
            output_format: Format picked on the command line. When given,
                POLICY_REVIEW_FORMAT is not read.
        """
        if output_format is None:
            output_format = os.environ.get("POLICY_REVIEW_FORMAT", "text").lower()

        return cls(
            output_format=output_format,
            show_code=os.environ.get("POLICY_REVIEW_SHOW_CODE", "true").lower() == "true",
            debug=os.environ.get("POLICY_REVIEW_DEBUG", "false").lower() == "true",
        )


# Default configuration
DEFAULT_CONFIG = ReviewConfig()
