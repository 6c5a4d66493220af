"""Validation report types for configuration checks."""


from dataclasses import dataclass, field


@dataclass(frozen=True)
class ValidationIssue:
    code: str
    message: str
    severity: str = "error"
    field: str | None = None
    key: str | None = None


@dataclass
class ValidationReport:
    valid: bool
    source: str | None = None
    issues: list[ValidationIssue] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {
            "valid": self.valid,
            "source": self.source,
            "issues": [issue.__dict__ for issue in self.issues],
        }


__all__ = ["ValidationIssue", "ValidationReport"]
