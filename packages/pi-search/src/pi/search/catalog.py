"""Redirect catalog: the candidate records the search box ranks.

Entries live in a TOML file (``redirects.toml`` by default)::

    [redirects.moodle]
    url = "https://moodle.example.org"
    description = "Learning platform"
    aliases = ["lms"]

The path can be overridden with the PI_SEARCH_CATALOG environment variable.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from pi.search.scoring import RankedCandidate, rank_candidates
from pi.search.types import Candidate, ManyAliases

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_FILE = "redirects.toml"


class CatalogError(Exception):
    """Raised when a catalog file cannot be read or is malformed."""


def get_catalog_path(path: str | os.PathLike[str] | None = None) -> Path:
    if path is not None:
        return Path(path)
    return Path(os.environ.get("PI_SEARCH_CATALOG", DEFAULT_CATALOG_FILE))


@dataclass
class Catalog:
    candidates: list[Candidate] = field(default_factory=list)
    _by_key: dict[str, Candidate] = field(default_factory=dict, init=False, repr=False)
    _by_alias: dict[str, Candidate] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        self.candidates = sorted(self.candidates, key=lambda c: c.key)
        for candidate in self.candidates:
            self._by_key[candidate.key] = candidate
        for candidate in self.candidates:
            for alias in candidate.aliases:
                owner = self._by_alias.get(alias)
                if owner is not None:
                    logger.warning(
                        "Alias %r of %r already belongs to %r, ignoring",
                        alias,
                        candidate.key,
                        owner.key,
                    )
                    continue
                self._by_alias[alias] = candidate

    def __len__(self) -> int:
        return len(self.candidates)

    def resolve(self, name: str) -> Candidate | None:
        """Look up an entry by exact key, then by exact alias.

        Only the first segment of a path such as ``/moodle/courses`` is used.
        """
        key = redirect_key(name)
        logger.debug("Checking redirect for: %s", key)

        candidate = self._by_key.get(key)
        if candidate is not None:
            logger.info("Redirecting /%s to %s", key, candidate.url)
            return candidate

        candidate = self._by_alias.get(key)
        if candidate is not None:
            logger.info("Redirecting /%s (alias) to %s", key, candidate.url)
            return candidate

        logger.info("No redirect for /%s", key)
        return None

    def search(
        self, query: str, *, fallback: bool = False, limit: int | None = None
    ) -> list[RankedCandidate]:
        return rank_candidates(self.candidates, query, fallback=fallback, limit=limit)

    def suggest(self, name: str, limit: int = 5) -> list[RankedCandidate]:
        """Suggestions for a name that did not resolve."""
        return self.search(redirect_key(name), fallback=True, limit=limit)


def redirect_key(name: str) -> str:
    """First path segment of ``name``, without leading slashes."""
    return name.lstrip("/").split("/", 1)[0]


def _entry_to_candidate(key: str, entry: object) -> Candidate:
    if not isinstance(entry, dict):
        raise CatalogError(f"Entry '{key}' must be a table")

    url = entry.get("url")
    description = entry.get("description")
    if not isinstance(url, str):
        raise CatalogError(f"Entry '{key}' is missing a string 'url'")
    if not isinstance(description, str):
        raise CatalogError(f"Entry '{key}' is missing a string 'description'")

    aliases = entry.get("aliases", [])
    if not isinstance(aliases, list) or not all(isinstance(a, str) for a in aliases):
        raise CatalogError(f"Entry '{key}' has invalid 'aliases', expected a list of strings")

    return Candidate(
        key=key,
        description=description,
        aliases=ManyAliases(tuple(aliases)),
        url=url,
    )


def parse_catalog(text: str) -> Catalog:
    """Parse catalog TOML text."""
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise CatalogError(f"Invalid TOML: {e}") from e

    redirects = data.get("redirects", {})
    if not isinstance(redirects, dict):
        raise CatalogError("'redirects' must be a table")

    return Catalog([_entry_to_candidate(key, entry) for key, entry in redirects.items()])


def load_catalog(path: str | os.PathLike[str] | None = None) -> Catalog:
    catalog_path = get_catalog_path(path)
    try:
        text = catalog_path.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogError(f"Cannot read catalog {catalog_path}: {e}") from e

    catalog = parse_catalog(text)
    logger.info("Loaded %d entries from %s", len(catalog), catalog_path)
    return catalog
