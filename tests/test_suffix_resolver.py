"""
Suffix Resolver and Token Normalizer Test Suite

Checks the ordered first-match-wins suffix policy against the curated vocabulary tables,
synonym recursion, injected vocabularies, and the idempotence of token normalization.
"""

import logging
import sys
from pathlib import Path
import pytest

# Add the parent directory to path to import patent_names
sys.path.insert(0, str(Path(__file__).parent.parent))

from patent_names.name_suffixes_data import (
    ORG_SUFFIXES,
    PERSON_FORMERLY_MARKERS,
    PERSON_LONG_SUFFIXES,
    PERSON_SUFFIXES,
)
from patent_names.names import (
    LONG_NAME_LEN,
    SHORT_SUFFIX_MAX_LEN,
    UNMATCHED,
    NameParser,
    NameParserConfig,
    OrgSuffix,
    PersonSuffix,
    PersonSynonymSuffix,
    SuffixResolver,
    SuffixVocabulary,
    is_organization,
    normalize_token,
    resolve_suffix,
    split_field,
)


@pytest.fixture(scope="session")
def resolver():
    return SuffixResolver(SuffixVocabulary.create_default())


# ════════════════════════════════════════════════════════════════════════════════
# TOKEN NORMALIZATION
# ════════════════════════════════════════════════════════════════════════════════

NORMALIZE_CASES = [
    ("Jr.", "JR"),
    ("jr", "JR"),
    (" l.l.c., ", "L.L.C"),
    ("Ph.D.", "PH.D"),
    ("INC,", "INC"),
    ("A PROF. CORP.", "A PROF. CORP"),
    ("", ""),
    ("...", ""),
]

IDEMPOTENCE_INPUTS = [
    "Jr.",
    "A. .",
    "A. ",
    "  ,. ",
    "x,y.",
    "L.L.C..",
    "straße.",
    " heir at law ,",
    "\tJR.\n",
    "P.C. .,",
]


@pytest.mark.parametrize("token,expected", NORMALIZE_CASES)
def test_normalize_token(token, expected):
    assert normalize_token(token) == expected


def test_normalize_token_is_idempotent():
    for token in IDEMPOTENCE_INPUTS + [t for t, _ in NORMALIZE_CASES]:
        once = normalize_token(token)
        assert normalize_token(once) == once, f"not idempotent for {token!r}: {once!r}"


def test_vocabulary_tables_are_normalized():
    for table in (PERSON_SUFFIXES, PERSON_LONG_SUFFIXES, ORG_SUFFIXES, PERSON_FORMERLY_MARKERS):
        for token in table:
            assert normalize_token(token) == token


# ════════════════════════════════════════════════════════════════════════════════
# FIELD SPLITTING
# ════════════════════════════════════════════════════════════════════════════════


def test_split_field():
    assert split_field("DOE, JR; JOHN") == ("DOE, JR", "JOHN")
    assert split_field(" DOE ;JOHN; Q ") == ("DOE", "JOHN; Q")
    assert split_field("DOE;") == ("DOE", "")
    assert split_field("  ACME CORPORATION ") == "ACME CORPORATION"


# ════════════════════════════════════════════════════════════════════════════════
# VOCABULARY-WIDE PROPERTIES
# ════════════════════════════════════════════════════════════════════════════════


def test_every_org_suffix_resolves_to_organization(resolver):
    for token in sorted(ORG_SUFFIXES):
        result = resolver.resolve("ACME, " + token)
        assert isinstance(result, OrgSuffix), f"'{token}' resolved to {result}"

        trailing_word = token.rsplit(" ", 1)[-1]
        if " " in token and trailing_word in ORG_SUFFIXES:
            # Trailing-word short-circuit keeps the whole segment and reports only the last word
            assert result == OrgSuffix(base="ACME, " + token, suffix=trailing_word)
        else:
            assert result.suffix == token


def test_every_short_person_suffix_resolves_to_person(resolver):
    for token in sorted(PERSON_SUFFIXES - ORG_SUFFIXES):
        result = resolver.resolve("SMITH, " + token)
        assert result == PersonSuffix(base="SMITH", suffix=token), f"'{token}' resolved to {result}"


def test_every_long_person_suffix_resolves_to_person(resolver):
    for token in sorted(PERSON_LONG_SUFFIXES):
        result = resolver.resolve("SMITH, " + token)
        assert isinstance(result, PersonSuffix), f"'{token}' resolved to {result}"
        assert result.base == "SMITH"


def test_shared_token_prefers_organization(resolver):
    assert "P.L" in PERSON_SUFFIXES and "P.L" in ORG_SUFFIXES
    assert resolver.resolve("SMITH, P.L.") == OrgSuffix(base="SMITH, P.L.", suffix="P.L")


# ════════════════════════════════════════════════════════════════════════════════
# ORDERED RESOLUTION
# ════════════════════════════════════════════════════════════════════════════════

RESOLVE_CASES = [
    # Trailing word short-circuit, no comma needed
    ("ACME WIDGETS INC.", OrgSuffix(base="ACME WIDGETS INC.", suffix="INC")),
    ("ACME", UNMATCHED),
    ("JOHN DOE", UNMATCHED),
    # Org designator found after the last comma only
    (
        "ACME, SMITH, PATENT & TRADEMARK ATTORNEYS",
        OrgSuffix(base="ACME", suffix="SMITH, PATENT & TRADEMARK ATTORNEYS"),
    ),
    # Person suffixes keep the raw tail
    ("DOE, Jr.", PersonSuffix(base="DOE", suffix="Jr.")),
    ("DOE , ph.d.", PersonSuffix(base="DOE", suffix="ph.d.")),
    ("DOE, Heir at Law", PersonSuffix(base="DOE", suffix="Heir at Law")),
    # Formerly-markers
    ("SMITH, NEE JONES", PersonSynonymSuffix(base="SMITH", suffix="NEE JONES", synonym_base="JONES")),
    (
        "SMITH, A/K/A JONES",
        PersonSynonymSuffix(base="SMITH", suffix="A/K/A JONES", synonym_base="JONES"),
    ),
    (
        "SMITH, NOW BY CHANGE OF NAME JONES",
        PersonSynonymSuffix(base="SMITH", suffix="NOW BY CHANGE OF NAME JONES", synonym_base="JONES"),
    ),
    (
        "SMITH, EXECUTRIX ALSO KNOWN AS JONES",
        PersonSynonymSuffix(base="SMITH", suffix="EXECUTRIX ALSO KNOWN AS JONES", synonym_base="JONES"),
    ),
    # Synonym resolved recursively down to its own base
    (
        "SMITH, NEE JONES, JR",
        PersonSynonymSuffix(base="SMITH", suffix="NEE JONES, JR", synonym_base="JONES"),
    ),
    (
        "SMITH, FORMERLY JONES, NEE BROWN",
        PersonSynonymSuffix(base="SMITH", suffix="FORMERLY JONES, NEE BROWN", synonym_base="JONES"),
    ),
    # Representative markers
    ("DOE, PRESIDENT OF ACME", PersonSuffix(base="DOE", suffix="PRESIDENT OF ACME")),
    ("DOE, BY SAID JANE DOE", PersonSuffix(base="DOE", suffix="BY SAID JANE DOE")),
    # Marker must be followed by a space
    ("DOE, NEEDHAM", UNMATCHED),
    ("DOE, SOMETHING ELSE", UNMATCHED),
]


def test_resolve_with_expected_results(resolver):
    failed = []
    for segment, expected in RESOLVE_CASES:
        result = resolver.resolve(segment)
        if result != expected:
            failed.append(f"'{segment}': expected {expected}, got {result}")

    assert not failed, f"{len(failed)} of {len(RESOLVE_CASES)} resolve cases failed:\n" + "\n".join(failed)


def test_module_level_functions():
    assert resolve_suffix("DOE, JR") == PersonSuffix(base="DOE", suffix="JR")
    assert is_organization("ACME, LLC") is True
    assert is_organization("DOE, JR") is False
    assert is_organization("DOE, SOMETHING") is False


def test_short_suffix_length_gate():
    vocab = SuffixVocabulary.from_tokens(person_suffixes=["abc", "abcd"])
    resolver = SuffixResolver(vocab)
    assert resolver.resolve("SMITH, ABC") == PersonSuffix(base="SMITH", suffix="ABC")
    assert resolver.resolve("SMITH, ABCD") is UNMATCHED


def test_custom_vocabulary_is_isolated():
    vocab = SuffixVocabulary.from_tokens(org_suffixes=["gmbh"], formerly_markers=["geb."])
    resolver = SuffixResolver(vocab)

    assert resolver.resolve("MUELLER GMBH") == OrgSuffix(base="MUELLER GMBH", suffix="GMBH")
    assert resolver.resolve("MUELLER, GEB SCHMIDT") == PersonSynonymSuffix(
        base="MUELLER", suffix="GEB SCHMIDT", synonym_base="SCHMIDT"
    )
    # Nothing from the default tables leaks in
    assert resolver.resolve("ACME, INC") is UNMATCHED
    assert resolver.resolve("DOE, JR") is UNMATCHED


def test_unmatched_suffix_is_logged(resolver, caplog):
    with caplog.at_level(logging.INFO):
        assert resolver.resolve("DOE, SOMETHING") is UNMATCHED
    assert "Unmatched suffix: 'SOMETHING'" in caplog.text


# ════════════════════════════════════════════════════════════════════════════════
# TERMINATION
# ════════════════════════════════════════════════════════════════════════════════


def test_long_marker_chain_terminates(resolver):
    names = [f"NAME{i}" for i in range(5000)]
    segment = ", NEE ".join(names)
    result = resolver.resolve(segment)
    assert result == PersonSynonymSuffix(base="NAME0", suffix=segment.split(", ", 1)[1], synonym_base="NAME1")


def test_repeated_markers_terminate(resolver):
    result = resolver.resolve("SMITH, NEE NEE NEE NEE")
    assert result == PersonSynonymSuffix(base="SMITH", suffix="NEE NEE NEE NEE", synonym_base="NEE NEE NEE")


def test_resolver_and_config_share_short_suffix_default():
    config = NameParserConfig.create_default()
    assert config.short_suffix_max_len == SHORT_SUFFIX_MAX_LEN
    assert config.long_name_len == LONG_NAME_LEN

    # A resolver built without an explicit bound gates short suffixes like the parser does
    vocab = SuffixVocabulary.from_tokens(person_suffixes=["abc", "abcd"])
    assert SuffixResolver(vocab).resolve("SMITH, ABCD") is UNMATCHED
    assert NameParser(config.with_vocabulary(vocab)).resolver.resolve("SMITH, ABCD") is UNMATCHED
