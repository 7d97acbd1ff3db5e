from pydantic import BaseModel, ConfigDict


class IdentifierCatalog(BaseModel):
    """@brief Ordered video identifiers offered by the dashboard.

    @details Uniqueness is not enforced. The first identifier is the default;
    an empty catalog falls back to `fallback`.
    """

    model_config = ConfigDict(frozen=True)

    identifiers: tuple[str, ...]
    fallback: str

    @property
    def default(self) -> str:
        """@brief Return the identifier used when a request names none."""
        if self.identifiers:
            return self.identifiers[0]
        return self.fallback
