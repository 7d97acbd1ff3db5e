from app.schemas.catalog import IdentifierCatalog


def parse_catalog(raw: str | None, fallback_single: str) -> IdentifierCatalog:
    """@brief Parse a comma-separated identifier list from configuration.

    @description Entries are trimmed and kept in order. An absent list yields
    `[fallback_single]`; a blank list yields an empty catalog whose default is
    `fallback_single`.

    @param raw Raw configuration value, e.g. `"BV1, BV2 ,BV3"`.
    @param fallback_single Identifier used when nothing else is configured.
    @return Parsed `IdentifierCatalog`.
    """
    if raw is None:
        return IdentifierCatalog(identifiers=(fallback_single,), fallback=fallback_single)

    if not raw.strip():
        return IdentifierCatalog(identifiers=(), fallback=fallback_single)

    identifiers = tuple(entry.strip() for entry in raw.split(","))
    return IdentifierCatalog(identifiers=identifiers, fallback=fallback_single)
