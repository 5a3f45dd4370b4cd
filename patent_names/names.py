"""
Patent Name Field Classification Module

This module turns the raw free-text name fields found in patent records (inventor, assignee,
attorney and agent names) into structured name records, deciding whether the field names a
natural person or an organization and pulling off any trailing suffix.

## Overview

Name fields arrive in the "Last; First" convention, but the last-name half frequently carries
extra material after a comma:

- Generational and honorific suffixes: `DOE, JR; JOHN`
- Fiduciary roles: `DOE, EXECUTRIX; JANE`
- Corporate designators: `ACME, INC; ` or an unsegmented `ACME CORPORATION`
- Prior names: `SMITH, NEE JONES; JANE` or `Smith formerly Jones; Jane`

The `NameParser` class resolves these with an ordered, first-match-wins heuristic:

1. **Split**: Break the field on the first `;` into last/first candidates
2. **Organization pre-check**: Long segments ending in a corporate suffix are organizations
3. **Cleanup**: Drop a leading "by", a trailing "deceased", repair a missing comma before "nee"
4. **Suffix resolution**: Classify the text after the first comma against the curated vocabulary,
   recursing into the alternate name introduced by a formerly-marker
5. **Record building**: Produce a `PersonName` (with aliases) or an `OrgName`

## Usage Examples

```python
from patent_names.names import create_name

create_name("DOE, JR; JOHN")
# PersonName(first_name='JOHN', last_name='DOE', suffix='JR', aliases=())

create_name("SMITH, FORMERLY JONES; JANE").aliases
# ('JONES, JANE', 'JONES, J.')

create_name("ACME CORPORATION")
# OrgName(full_name='ACME CORPORATION', suffix=None)
```

Custom vocabularies are injected through the configuration:

```python
from patent_names.names import NameParser, NameParserConfig, SuffixVocabulary

vocab = SuffixVocabulary.create_default().with_additional(org_suffixes=["GMBH"])
parser = NameParser(NameParserConfig.create_default().with_vocabulary(vocab))
```

## Error Handling

- `create_name(None)` / `create_name("  ")`: raises `InvalidNameError`
- `read_name(None)`: returns None, the field is simply skipped
- Unrecognized suffixes are not errors: they are logged at INFO for vocabulary curation and the
  field falls back to an organization record

## Thread Safety

All shared data (vocabulary, configuration, compiled patterns) is immutable, and parsing keeps no
state between calls, so a parser can be used from any number of threads.
"""

from __future__ import annotations
import re
import logging
from typing import Any, Callable, Dict, FrozenSet, Iterable, Optional, Tuple, Union
from dataclasses import dataclass, field, replace

from patent_names.name_suffixes_data import (
    PERSON_SUFFIXES,
    PERSON_LONG_SUFFIXES,
    ORG_SUFFIXES,
    PERSON_FORMERLY_MARKERS,
    PERSON_REPRESENTATIVE_MARKERS,
    COMMA_REPAIR_MARKERS,
)


# ════════════════════════════════════════════════════════════════════════════════
# COMPILED REGEX PATTERNS
# ════════════════════════════════════════════════════════════════════════════════

# Trailing periods and whitespace stripped together so normalization is idempotent
_TRAILING_PERIOD_PATTERN = re.compile(r"[\s.]+\Z")

_FIRST_NAME_CLEAN_PATTERN = r"^by "
_LAST_NAME_CLEAN_PATTERN = r",? deceased\b"

# Defaults shared by NameParserConfig and SuffixResolver
LONG_NAME_LEN = 18
SHORT_SUFFIX_MAX_LEN = 4


def _build_comma_fix_pattern(markers: Iterable[str]) -> re.Pattern[str]:
    """Lowercase letter, space, marker: the marker group alone is case-insensitive."""
    alternatives = "|".join(re.escape(m) for m in sorted(markers, key=len, reverse=True))
    return re.compile(f"([a-z]) ((?i:{alternatives})) ")


# ════════════════════════════════════════════════════════════════════════════════
# ERRORS
# ════════════════════════════════════════════════════════════════════════════════


class InvalidNameError(ValueError):
    """Raised when a name field is absent, blank, or cannot yield a primary name."""


# ════════════════════════════════════════════════════════════════════════════════
# TOKEN NORMALIZATION
# ════════════════════════════════════════════════════════════════════════════════


def normalize_token(token: str) -> str:
    """
    Canonicalize a token before vocabulary lookup.

    Removes commas, strips the trailing period (and any whitespace around it), trims and
    uppercases: "Jr." -> "JR", " l.l.c., " -> "L.L.C". Applying it twice gives the same result.
    """
    return _TRAILING_PERIOD_PATTERN.sub("", token.replace(",", "")).strip().upper()


def split_field(raw: str) -> Union[Tuple[str, str], str]:
    """
    Split a raw name field on the first semicolon.

    Returns (last, first) when the field follows the "Last; First" convention, otherwise the
    whole trimmed string.
    """
    parts = [part.strip() for part in raw.split(";", 1)]
    if len(parts) == 2:
        return parts[0], parts[1]
    return raw.strip()


# ════════════════════════════════════════════════════════════════════════════════
# RESULT TYPES
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class OrgSuffix:
    """Segment ends in a corporate designator."""

    base: str
    suffix: str


@dataclass(frozen=True)
class PersonSuffix:
    """Segment ends in a personal, fiduciary or representative suffix."""

    base: str
    suffix: str


@dataclass(frozen=True)
class PersonSynonymSuffix:
    """Segment names a person and an alternate (prior, maiden, aka) surname."""

    base: str
    suffix: str
    synonym_base: str


@dataclass(frozen=True)
class UnmatchedSuffix:
    """Nothing recognizable after the comma."""


UNMATCHED = UnmatchedSuffix()

SuffixResolution = Union[OrgSuffix, PersonSuffix, PersonSynonymSuffix, UnmatchedSuffix]


@dataclass(frozen=True)
class PersonName:
    """Natural person parsed from a "Last; First" field."""

    first_name: str
    last_name: str
    suffix: Optional[str] = None
    aliases: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.last_name:
            raise InvalidNameError("Person name is missing a last name")
        # Accept any iterable for aliases but always store a tuple
        object.__setattr__(self, "aliases", tuple(self.aliases))

    @property
    def kind(self) -> str:
        return "person"

    @property
    def primary_name(self) -> str:
        return self.last_name

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "suffix": self.suffix,
            "aliases": list(self.aliases),
        }


@dataclass(frozen=True)
class OrgName:
    """Organization; full_name is the name as it appeared in the record."""

    full_name: str
    suffix: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.full_name:
            raise InvalidNameError("Organization name is empty")

    @property
    def kind(self) -> str:
        return "org"

    @property
    def primary_name(self) -> str:
        return self.full_name

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "full_name": self.full_name, "suffix": self.suffix}


NameRecord = Union[PersonName, OrgName]


@dataclass(frozen=True)
class NameResult:
    """Outcome of parsing one name field - success carries a record, failure a reason."""

    success: bool
    record: Optional[NameRecord] = None
    error_message: Optional[str] = None

    @classmethod
    def success_with_record(cls, record: NameRecord) -> "NameResult":
        return cls(success=True, record=record, error_message=None)

    @classmethod
    def failure(cls, error_message: str) -> "NameResult":
        return cls(success=False, record=None, error_message=error_message)

    def map(self, f: Callable[[NameRecord], NameRecord]) -> "NameResult":
        """Transform the record of a successful result, turning a rejected record into a failure."""
        if self.success and self.record is not None:
            try:
                return NameResult.success_with_record(f(self.record))
            except InvalidNameError as e:
                return NameResult.failure(str(e))
        return self


# ════════════════════════════════════════════════════════════════════════════════
# IMMUTABLE CONFIGURATION DATA
# ════════════════════════════════════════════════════════════════════════════════


def _normalized_set(tokens: Iterable[str]) -> FrozenSet[str]:
    return frozenset(t for t in (normalize_token(token) for token in tokens) if t)


@dataclass(frozen=True)
class SuffixVocabulary:
    """The five curated token tables, normalized and read-only."""

    person_suffixes: FrozenSet[str]
    person_long_suffixes: FrozenSet[str]
    org_suffixes: FrozenSet[str]
    formerly_markers: FrozenSet[str]
    representative_markers: FrozenSet[str]

    @classmethod
    def create_default(cls) -> "SuffixVocabulary":
        return cls(
            person_suffixes=PERSON_SUFFIXES,
            person_long_suffixes=PERSON_LONG_SUFFIXES,
            org_suffixes=ORG_SUFFIXES,
            formerly_markers=PERSON_FORMERLY_MARKERS,
            representative_markers=PERSON_REPRESENTATIVE_MARKERS,
        )

    @classmethod
    def from_tokens(
        cls,
        person_suffixes: Iterable[str] = (),
        person_long_suffixes: Iterable[str] = (),
        org_suffixes: Iterable[str] = (),
        formerly_markers: Iterable[str] = (),
        representative_markers: Iterable[str] = (),
    ) -> "SuffixVocabulary":
        """Build a vocabulary from raw tokens in any case or punctuation."""
        return cls(
            person_suffixes=_normalized_set(person_suffixes),
            person_long_suffixes=_normalized_set(person_long_suffixes),
            org_suffixes=_normalized_set(org_suffixes),
            formerly_markers=_normalized_set(formerly_markers),
            representative_markers=_normalized_set(representative_markers),
        )

    def with_additional(
        self,
        person_suffixes: Iterable[str] = (),
        person_long_suffixes: Iterable[str] = (),
        org_suffixes: Iterable[str] = (),
        formerly_markers: Iterable[str] = (),
        representative_markers: Iterable[str] = (),
    ) -> "SuffixVocabulary":
        """Immutable update - returns a copy with the extra tokens merged in."""
        return replace(
            self,
            person_suffixes=self.person_suffixes | _normalized_set(person_suffixes),
            person_long_suffixes=self.person_long_suffixes | _normalized_set(person_long_suffixes),
            org_suffixes=self.org_suffixes | _normalized_set(org_suffixes),
            formerly_markers=self.formerly_markers | _normalized_set(formerly_markers),
            representative_markers=self.representative_markers | _normalized_set(representative_markers),
        )


@dataclass(frozen=True)
class NameParserConfig:
    """Immutable parser configuration: vocabulary, thresholds and precompiled cleanup patterns."""

    vocabulary: SuffixVocabulary

    # Segments longer than this are checked for an organization suffix before splitting
    long_name_len: int

    # Short person suffixes only match below this length
    short_suffix_max_len: int

    # Precompiled cleanup patterns (immutable)
    first_name_clean: re.Pattern[str] = field(repr=False)
    last_name_clean: re.Pattern[str] = field(repr=False)
    comma_fix: re.Pattern[str] = field(repr=False)

    @classmethod
    def create_default(cls) -> "NameParserConfig":
        """Factory method for the default configuration."""
        return cls(
            vocabulary=SuffixVocabulary.create_default(),
            long_name_len=LONG_NAME_LEN,
            short_suffix_max_len=SHORT_SUFFIX_MAX_LEN,
            first_name_clean=re.compile(_FIRST_NAME_CLEAN_PATTERN, re.IGNORECASE),
            last_name_clean=re.compile(_LAST_NAME_CLEAN_PATTERN, re.IGNORECASE),
            comma_fix=_build_comma_fix_pattern(COMMA_REPAIR_MARKERS),
        )

    def with_vocabulary(self, vocabulary: SuffixVocabulary) -> "NameParserConfig":
        """Immutable update method."""
        return replace(self, vocabulary=vocabulary)

    def with_long_name_len(self, long_name_len: int) -> "NameParserConfig":
        """Immutable update method."""
        return replace(self, long_name_len=long_name_len)


# ════════════════════════════════════════════════════════════════════════════════
# SUFFIX RESOLUTION SERVICE
# ════════════════════════════════════════════════════════════════════════════════


class SuffixResolver:
    """Classifies the trailing content of a last-name segment against a suffix vocabulary."""

    def __init__(self, vocabulary: SuffixVocabulary, short_suffix_max_len: int = SHORT_SUFFIX_MAX_LEN):
        self._vocab = vocabulary
        self._short_suffix_max_len = short_suffix_max_len
        # Longest marker first so overlapping markers match deterministically
        self._formerly_markers = tuple(sorted(vocabulary.formerly_markers, key=len, reverse=True))
        self._representative_markers = tuple(sorted(vocabulary.representative_markers, key=len, reverse=True))

    @property
    def vocabulary(self) -> SuffixVocabulary:
        return self._vocab

    def resolve(self, segment: str) -> SuffixResolution:
        """
        Resolve the suffix of a name segment, first match wins.

        1. Trailing word is an org suffix -> OrgSuffix of the whole segment
        2. No comma -> UNMATCHED
        3. Text after the first comma (or after the last comma) is an org suffix -> OrgSuffix
        4. Short or long person suffix -> PersonSuffix
        5. Formerly-marker -> PersonSynonymSuffix, resolving the alternate name recursively
        6. Representative marker -> PersonSuffix
        7. Otherwise UNMATCHED
        """
        return self._resolve(segment, resolve_synonym=True)

    def _resolve(self, segment: str, resolve_synonym: bool) -> SuffixResolution:
        last_word = normalize_token(segment[segment.rfind(" ") + 1 :])
        if last_word in self._vocab.org_suffixes:
            return OrgSuffix(base=segment, suffix=last_word)

        if "," not in segment:
            return UNMATCHED

        base, suffix = (part.strip() for part in segment.split(",", 1))
        suffix_check = normalize_token(suffix)
        last_comma_word = normalize_token(segment[segment.rfind(",") + 1 :])

        if suffix_check in self._vocab.org_suffixes or last_comma_word in self._vocab.org_suffixes:
            return OrgSuffix(base=base, suffix=suffix)

        if self._is_person_suffix(suffix_check):
            logging.debug(f"Suffix fixed, common suffix '{suffix_check}' from last name: '{segment}' -> '{base}'")
            return PersonSuffix(base=base, suffix=suffix)

        marker = self._match_marker(suffix_check, self._formerly_markers)
        if marker is not None:
            synonym = suffix[len(marker) + 1 :].lstrip(" ,")
            if resolve_synonym:
                synonym = self._resolve_synonym(segment, synonym)
            logging.debug(f"Suffix fixed '{suffix_check}' [{marker}] from last name: '{synonym}' -> '{base}'")
            return PersonSynonymSuffix(base=base, suffix=suffix, synonym_base=synonym)

        if self._match_marker(suffix_check, self._representative_markers) is not None:
            logging.debug(f"Suffix fixed '{suffix_check}' from last name: '{segment}' -> '{base}'")
            return PersonSuffix(base=base, suffix=suffix)

        logging.info(f"Unmatched suffix: '{suffix}' from last name: '{segment}'")
        return UNMATCHED

    def is_organization(self, name: str) -> bool:
        """True when the name resolves to an organization suffix."""
        return isinstance(self.resolve(name), OrgSuffix)

    def _is_person_suffix(self, suffix_check: str) -> bool:
        if len(suffix_check) < self._short_suffix_max_len and suffix_check in self._vocab.person_suffixes:
            return True
        return suffix_check in self._vocab.person_long_suffixes

    def _resolve_synonym(self, segment: str, remainder: str) -> str:
        """Base name of the alternate name following a formerly-marker."""
        # One level only: a formerly-marker inside the synonym is not expanded
        if not remainder or len(remainder) >= len(segment):
            return remainder
        nested = self._resolve(remainder, resolve_synonym=False)
        if isinstance(nested, UnmatchedSuffix):
            return remainder
        return nested.base

    @staticmethod
    def _match_marker(suffix_check: str, markers: Tuple[str, ...]) -> Optional[str]:
        for marker in markers:
            if suffix_check.startswith(marker + " "):
                return marker
        return None


# ════════════════════════════════════════════════════════════════════════════════
# NAME PARSER (record builder)
# ════════════════════════════════════════════════════════════════════════════════


class NameParser:
    """Main name field parser: splits, cleans and classifies raw name fields."""

    def __init__(self, config: Optional[NameParserConfig] = None):
        self._config = config or NameParserConfig.create_default()
        self._resolver = SuffixResolver(self._config.vocabulary, self._config.short_suffix_max_len)

    @property
    def config(self) -> NameParserConfig:
        return self._config

    @property
    def resolver(self) -> SuffixResolver:
        return self._resolver

    def clean_first(self, first_name: str) -> str:
        """Drop a leading "by " left over from "executed by" style fields."""
        return self._config.first_name_clean.sub("", first_name, count=1).strip()

    def clean_last(self, last_name: str) -> str:
        """Drop ", deceased" and insert the comma missing before a formerly-marker."""
        last_name = self._config.last_name_clean.sub("", last_name, count=1).strip()
        return self._config.comma_fix.sub(r"\1, \2 ", last_name, count=1)

    def is_organization(self, name: str) -> bool:
        return self._resolver.is_organization(name)

    def create_name(self, full_name: Optional[str]) -> NameRecord:
        """
        Parse a raw name field and build a name record.

        Args:
            full_name: Raw field text, e.g. "DOE, JR; JOHN" or "ACME CORPORATION"

        Returns:
            PersonName or OrgName

        Raises:
            InvalidNameError: if the field is None, blank, or has no usable last name
        """
        if full_name is None or not full_name.strip():
            raise InvalidNameError("Name is missing")

        whole_name = full_name.strip()
        name_parts = split_field(full_name)

        # Person names are expected as "Last; First", anything else is taken as an organization
        if isinstance(name_parts, str):
            return OrgName(whole_name)

        last_name, first_name = name_parts

        long_len = self._config.long_name_len
        if (len(first_name) > long_len or len(last_name) > long_len) and (
            self.is_organization(first_name) or self.is_organization(last_name)
        ):
            return OrgName(whole_name)

        first_name = self.clean_first(first_name)
        last_name = self.clean_last(last_name)

        if "," not in last_name:
            return PersonName(first_name, last_name)

        return self._build_from_suffix(whole_name, first_name, self._resolver.resolve(last_name))

    def read_name(self, raw_name: Optional[str]) -> Optional[NameRecord]:
        """
        Boundary entry point for field readers.

        Absent or blank fields and fields that cannot be parsed yield None so the caller can skip
        the name without aborting the rest of the record.
        """
        if raw_name is None or not raw_name.strip():
            return None
        try:
            return self.create_name(raw_name)
        except InvalidNameError as e:
            logging.debug(f"Skipping name field '{raw_name}': {e}")
            return None

    def parse(self, raw_name: Optional[str]) -> NameResult:
        """Like read_name, but reports why no record was produced."""
        if raw_name is None or not raw_name.strip():
            return NameResult.failure("name is missing")
        try:
            return NameResult.success_with_record(self.create_name(raw_name))
        except InvalidNameError as e:
            return NameResult.failure(str(e))

    def _build_from_suffix(self, whole_name: str, first_name: str, resolution: SuffixResolution) -> NameRecord:
        if isinstance(resolution, OrgSuffix):
            return OrgName(resolution.base or whole_name, resolution.suffix)

        if isinstance(resolution, PersonSuffix):
            return PersonName(first_name, resolution.base, resolution.suffix)

        if isinstance(resolution, PersonSynonymSuffix):
            aliases = self._synonym_aliases(resolution.synonym_base, first_name)
            return PersonName(first_name, resolution.base, resolution.suffix, aliases)

        # Ambiguous comma-bearing last name: treat as an organization rather than mis-split a person
        return OrgName(whole_name)

    @staticmethod
    def _synonym_aliases(synonym_base: str, first_name: str) -> Tuple[str, ...]:
        """Alternate "Last, First" and "Last, F." forms for the synonym surname."""
        if first_name:
            # Whole-word match only, "ANN" must not be cut out of "ANNAN"
            first_name_pattern = re.compile(rf"(?<!\w){re.escape(first_name)}(?!\w)")
            synonym_base = " ".join(first_name_pattern.sub("", synonym_base, count=1).split()).strip(" ,")
        if not synonym_base:
            return ()
        if not first_name:
            return (synonym_base,)
        return (f"{synonym_base}, {first_name}", f"{synonym_base}, {first_name[0]}.")


# ════════════════════════════════════════════════════════════════════════════════
# MODULE-LEVEL CONVENIENCE FUNCTIONS
# ════════════════════════════════════════════════════════════════════════════════

# Global parser instance for module-level functions
_global_parser: Optional[NameParser] = None


def _get_global_parser() -> NameParser:
    """Get or create the global parser instance."""
    global _global_parser
    if _global_parser is None:
        _global_parser = NameParser()
    return _global_parser


def create_name(full_name: Optional[str]) -> NameRecord:
    """
    Module-level convenience function for parsing a name field.

    Args:
        full_name: Raw name field text

    Returns:
        PersonName or OrgName

    Raises:
        InvalidNameError: if the field is None or blank
    """
    return _get_global_parser().create_name(full_name)


def read_name(raw_name: Optional[str]) -> Optional[NameRecord]:
    """Parse a name field, returning None when there is nothing usable."""
    return _get_global_parser().read_name(raw_name)


def parse_name(raw_name: Optional[str]) -> NameResult:
    return _get_global_parser().parse(raw_name)


def resolve_suffix(segment: str) -> SuffixResolution:
    return _get_global_parser().resolver.resolve(segment)


def is_organization(name: str) -> bool:
    return _get_global_parser().is_organization(name)
