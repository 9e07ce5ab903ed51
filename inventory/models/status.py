import enum


class Status(enum.Enum):
    """Presentational status shown as a badge next to a record."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"
    ARCHIVED = "archived"

    @property
    def label(self) -> str:
        return self.value.title()

    @property
    def badge_class(self) -> str:
        return f"badge badge-{self.value}"
