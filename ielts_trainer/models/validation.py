"""Data models for configuration validation."""

from dataclasses import dataclass, field


@dataclass
class ValidationIssue:
    """A single validation issue."""

    component: str  # Setting that failed (e.g., "word_count", "topics")
    severity: str  # "ERROR" or "WARNING"
    message: str  # Description of the issue

    def __str__(self) -> str:
        return f"[{self.severity}] {self.component}: {self.message}"


@dataclass
class ValidationResult:
    """Result of configuration validation."""

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def all_passed(self) -> bool:
        """Check if no error-level issues were found."""
        return not self.has_errors

    @property
    def has_errors(self) -> bool:
        """Check if there are any error-level issues."""
        return any(issue.severity == "ERROR" for issue in self.issues)

    @property
    def has_warnings(self) -> bool:
        """Check if there are any warning-level issues."""
        return any(issue.severity == "WARNING" for issue in self.issues)

    def get_errors(self) -> list[ValidationIssue]:
        """Get all error-level issues."""
        return [issue for issue in self.issues if issue.severity == "ERROR"]

    def get_warnings(self) -> list[ValidationIssue]:
        """Get all warning-level issues."""
        return [issue for issue in self.issues if issue.severity == "WARNING"]

    def __str__(self) -> str:
        status = "PASSED" if self.all_passed else "FAILED"
        return (
            f"ValidationResult({status}, errors={len(self.get_errors())}, "
            f"warnings={len(self.get_warnings())})"
        )
