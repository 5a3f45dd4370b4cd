# ═════════════════════════════════════════════════════════════════════════════════
# CURATED NAME SUFFIX VOCABULARY
# ═════════════════════════════════════════════════════════════════════════════════
#
# Tokens are stored in normalized form (uppercase, no commas, no trailing period)
# so they can be compared directly against normalize_token() output.
#
# Lookup precedence is applied by the resolver, not here:
# 1. ORG_SUFFIXES: corporate entity designators (always checked first)
# 2. PERSON_SUFFIXES / PERSON_LONG_SUFFIXES: generational, honorific, fiduciary
# 3. PERSON_FORMERLY_MARKERS: introduce a prior or alternate name
# 4. PERSON_REPRESENTATIVE_MARKERS: party acting in a representative capacity
# ═════════════════════════════════════════════════════════════════════════════════

# Short person suffixes, only honored when the normalized suffix is under 4 characters
PERSON_SUFFIXES = frozenset(
    {
        "PHD",
        "ESQ",
        "J.D",
        "MR",
        "MRS",
        "M.D",
        "DR",
        "P.L",  # also an org suffix; org wins
        "P.E",
        "JR",
        "SR",
        # Generational
        "I",
        "II",
        "III",
        "IV",
        "V",
        "1ST",
        "2ND",
        "3RD",
        "4TH",
        "5TH",
        "1",
        "2",
        "3",
        "4",
        "5",
    }
)

# Long person suffixes, matched exactly with no length bound (misspellings are as seen in the records)
PERSON_LONG_SUFFIXES = frozenset(
    {
        "PH.D",
        # Estate administration
        "ADMINISTRATOR",
        "ADMINSTRATOR",
        "ADMINISTRATOR AND EXECUTOR",
        "ADMINISTRATOR BY",
        "ADMINISTRATORS",
        "ADMINISTRATRIX/EXECUTRIX",
        "ADMINISTRATRIX",
        "AMINISTRATRIX",
        "SPECIAL ADMINISTRATOR",
        "CO-EXECUTRIX",
        "COEXECUTRIX",
        "EXECTRIX",
        "EXECUTOR",
        "EXECUTER",
        "EXECUTORS",
        "EXECUTOR OF ESTATE",
        "EXECUTRIX",
        "COEXECUTOR",
        "CO-EXECUTOR",
        # Practitioners
        "AGENT",
        "PATENT AGENT",
        "PAT. AGENT",
        "ASSOC",
        "ASSICIATE",
        "ATTY",
        "ATTORNEY",
        "PATENT ATTORNEY",
        "PAT. ATTY",
        "ESQUIRE",
        # Guardians and heirs
        "LEGAL GUARDIAN",
        "GUARDIAN",
        "HEIR",
        "HEIR AND LEGAL SUCCESSOR",
        "HEIRS",
        "HEIRS-AT-LAW",
        "HEIR-AT-LAW",
        "HEIR AT LAW",
        "HEIRESS",
        "INHERITOR",
        "LEGAL AUTHORIZED HEIR",
        "LEGAL HEIR",
        "SUCCESSOR",
        "SOLE BENEFICIARY",
        "SOLE HEIR",
        "SURVIVING SPOUSE",
        # Representatives
        "LEGAL REPRESENTATIVE",
        "LEGAL REPRESENTIVE",
        "A LEGAL REPRESENTATIVE",
        "LEGAL REPRESENTATIVE AND HEIR",
        "REPRESENTATIVE",
        "PERSONAL REPRESENTATIVE",
        "PERSONAL REPRESENTATIVE OF THE ESTATE",
        "JOINT PERSONAL REPRESENTATIVE",
        # Trusts
        "TRUST",
        "TRUSTEE",
        "TRUSTEE OR SUCCESSOR TRUSTEE",
        # Deceased and truncated forms
        "DECEASED",
        "DECESASED",
        "LEGAL",
        "LEGALESS",
        # Compound generational + role
        "IV ESQ",
        "JR. DECEASED",
        "JR. II",
        "JR. ESQ",
        "JR. ATTY",
        "JR. EXECUTOR",
        "JR. CO-EXECUTOR",
        "SR. DECEASED",
        "JR. HEIR",
    }
)

ORG_SUFFIXES = frozenset(
    {
        "INCORPORATED",
        "INC",
        "CORP",
        "COMPANY",
        "GROUP",
        # Limited liability
        "LLC",
        "L.L.C",
        "LTD",
        "LTD PLC",
        "PLC",
        "P.L.C",
        "L.C",
        "LC",
        "LLP",
        "L.L.P",
        "P.L.L.C",
        "PLLC",
        # Professional associations
        "S.C",
        "P.A",
        "PA",
        "P.C",
        "PC",
        "P.L",
        "P.S",
        "S.P.A",
        "S.P.C",
        "CHTD",
        "L.P.A",
        "A PROFESSIONAL CORP",
        "A PROF. CORP",
        # Law-firm practice groups
        "IP GROUP",
        "INTELLECTUAL PROPERTY PRACTICE GROUP",
        "PATENT & TRADEMARK ATTORNEYS",
    }
)

# Followed by a space and the alternate name, e.g. "SMITH, NEE JONES"
PERSON_FORMERLY_MARKERS = frozenset(
    {
        "NEE",
        "BORN",
        "FORMERLY",
        "WIDOW",
        "BY CHANGE OF NAME",
        "NOW BY CHANGE OF NAME",
        "A/K/A",
        "ALSO KNOWN AS",
        "EXECUTRIX ALSO KNOWN AS",
    }
)

# Suffix starts that mark a person acting for someone else, e.g. "DOE, ADMINISTRATOR OF JOHN DOE"
PERSON_REPRESENTATIVE_MARKERS = frozenset(
    {
        "BY SAID",
        "PRESIDENT",
        "ADMINISTRATOR OF",
        "EXECUTOR OF ESTATE OF",
    }
)

# Lowercase markers that commonly appear without the preceding comma ("Smith nee Jones")
COMMA_REPAIR_MARKERS = ("nee", "born", "formerly", "widow", "also known as")


# ═════════════════════════════════════════════════════════════════════════════════
# VALIDATION
# ═════════════════════════════════════════════════════════════════════════════════


def _assert_short_suffixes(tokens):
    """Short person suffixes are length gated, so a longer entry could never match."""
    too_long = sorted(t for t in tokens if len(t) >= 4)
    if too_long:
        raise ValueError(f"PERSON_SUFFIXES entries must be under 4 characters: {too_long}")


def _assert_normalized(table_name, tokens):
    bad = sorted(t for t in tokens if t != t.strip().upper() or "," in t or t.endswith("."))
    if bad:
        raise ValueError(f"Non-normalized tokens in {table_name}: {bad}")


def _assert_repair_markers_known():
    unknown = {m.upper() for m in COMMA_REPAIR_MARKERS} - PERSON_FORMERLY_MARKERS
    if unknown:
        raise ValueError(f"COMMA_REPAIR_MARKERS not in PERSON_FORMERLY_MARKERS: {sorted(unknown)}")


_assert_short_suffixes(PERSON_SUFFIXES)
_assert_normalized("PERSON_SUFFIXES", PERSON_SUFFIXES)
_assert_normalized("PERSON_LONG_SUFFIXES", PERSON_LONG_SUFFIXES)
_assert_normalized("ORG_SUFFIXES", ORG_SUFFIXES)
_assert_normalized("PERSON_FORMERLY_MARKERS", PERSON_FORMERLY_MARKERS)
_assert_normalized("PERSON_REPRESENTATIVE_MARKERS", PERSON_REPRESENTATIVE_MARKERS)
_assert_repair_markers_known()
