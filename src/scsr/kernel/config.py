"""Report configuration: size limit, thresholds and row messages."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from scsr.codes import SizeStatus

# EIP-170 runtime bytecode limit
MAX_BYTE_CODE_LIMIT = 24576


class ReportConfig(BaseModel):
    """Immutable settings for one report run.

    Pass a custom instance to the report builder to check a different
    chain limit or to exercise threshold boundaries in tests.
    """
    limit: int = Field(MAX_BYTE_CODE_LIMIT, gt=0, description="Maximum deployed bytecode size in bytes")
    notice_ratio: float = Field(0.8, gt=0, le=1, description="Fraction of limit at which a contract is near the limit")
    display_ratio: float = Field(0.15, gt=0, le=1, description="Fraction of limit below which rows are hidden unless detailed")
    banner: str = "Please review the following contracts!!!"
    message_over_limit: str = "This contract is too big to be deployed!"
    message_near_limit: str = "Maximum capacity almost reached. Please refactor."
    message_ok: str = "OK"

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="after")
    def check_banner(self) -> "ReportConfig":
        if not self.banner:
            raise ValueError("banner must not be empty")
        return self

    @property
    def notice_threshold(self) -> float:
        """Deployed size (bytes) from which NEAR_LIMIT applies."""
        return self.notice_ratio * self.limit

    @property
    def display_threshold(self) -> float:
        """Deployed size (bytes) below which rows are hidden in summary mode."""
        return self.display_ratio * self.limit

    def message_for(self, status: SizeStatus) -> str:
        """Row message for a size status."""
        if status == SizeStatus.OVER_LIMIT:
            return self.message_over_limit
        if status == SizeStatus.NEAR_LIMIT:
            return self.message_near_limit
        return self.message_ok


DEFAULT_CONFIG = ReportConfig()
