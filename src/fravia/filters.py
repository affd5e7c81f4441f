"""Noise-filter table and per-engine hygiene resolution.

Every filter is on by default. A lowercase letter in the caller's code string
relaxes the matching filter for that call only; the table itself is never
touched. Each filter carries a precomputed clause per search-engine dialect
because exclusion operators do not translate mechanically between engines.
"""

from __future__ import annotations

from typing import Mapping, get_args

from .models import FilterConfig, HygieneDialect, MenuConfig, NoiseFilter


HYGIENE_DIALECTS: tuple[HygieneDialect, ...] = get_args(HygieneDialect)
DEFAULT_DIALECT: HygieneDialect = "google"

# Relax letter -> filter identifier in the filter table.
RELAX_CODES: dict[str, str] = {
    "s": "1",
    "f": "2",
    "t": "3",
    "u": "4",
    "c": "5",
    "l": "6",
    "a": "7",
}

NOISE_FILTERS: tuple[NoiseFilter, ...] = (
    NoiseFilter(
        code="s",
        name="Social/Forum",
        applies="Pinterest, Reddit, Quora, Facebook, Twitter",
    ),
    NoiseFilter(
        code="f",
        name="Free Hosting/Blogs",
        applies="Blogspot, Wix, Weebly, Tumblr, WordPress.com",
    ),
    NoiseFilter(
        code="t",
        name="Spam TLDs",
        applies=".info, .xyz, .top, .click, .online, .site, .space, .icu, .buzz",
    ),
    NoiseFilter(
        code="u",
        name="Structural Cruft",
        applies="/tag/, /category/, /page/, /archive/, ?p=, ?page=",
    ),
    NoiseFilter(
        code="c",
        name="Commercial/Affiliate",
        applies="affiliate tracking, 'we may earn', Amazon associate",
    ),
    NoiseFilter(
        code="l",
        name="Clickbait/Listicles",
        applies="top 10, best X for Y, ultimate guide",
    ),
    NoiseFilter(
        code="a",
        name="Generic AI Slop",
        applies="comprehensive guide, let's dive in, without further ado",
    ),
)

DEFAULT_FILTERS: dict[str, FilterConfig] = {
    "1": FilterConfig(
        code="s",
        name="SOCIAL",
        google="-site:pinterest.* -site:twitter.com -site:facebook.com -site:reddit.com -site:quora.com",
        bing="NOT site:pinterest.com NOT site:twitter.com NOT site:facebook.com NOT site:reddit.com",
        yandex="-site:pinterest.com -site:twitter.com -site:facebook.com -site:reddit.com",
        ddg="-site:pinterest.com -site:twitter.com -site:facebook.com -site:reddit.com",
    ),
    "2": FilterConfig(
        code="f",
        name="FREE_HOSTING",
        google="-site:blogspot.* -site:*.wixsite.com -site:weebly.com -site:tumblr.com -site:*.wordpress.com -site:sites.google.com",
        bing="NOT site:blogspot.com NOT url:wixsite NOT url:weebly NOT site:tumblr.com",
        yandex="-rhost:com.blogspot.* -rhost:com.wixsite.* -rhost:com.weebly.* -site:tumblr.com",
        ddg="-blogspot -wixsite -weebly -tumblr",
    ),
    "3": FilterConfig(
        code="t",
        name="SPAM_TLDS",
        google="-site:.info -site:.xyz -site:.top -site:.click -site:.online -site:.site -site:.space -site:.icu -site:.buzz",
        bing="NOT site:.info NOT site:.xyz NOT site:.top NOT site:.click NOT site:.online",
        yandex="-domain:info -domain:xyz -domain:top -domain:click -domain:online",
        ddg="-site:.info -site:.xyz -site:.top -site:.click -site:.online",
    ),
    "4": FilterConfig(
        code="u",
        name="STRUCTURAL_CRUFT",
        google="-inurl:/tag/ -inurl:/category/ -inurl:/page/ -inurl:/archive/ -inurl:?p= -inurl:?page=",
        bing="NOT url:tag NOT url:category NOT url:page NOT url:archive",
        yandex="-inurl:/tag/ -inurl:/category/ -inurl:/page/",
        ddg="-inurl:/tag/ -inurl:/category/ -inurl:/page/",
    ),
    "5": FilterConfig(
        code="c",
        name="COMMERCIAL",
        google='-"affiliate" -"we may earn" -"as an amazon associate" -inurl:affiliate -inurl:sponsored',
        bing='NOT "affiliate" NOT "we may earn" NOT inbody:"taboola" NOT inbody:"outbrain"',
        yandex='-"affiliate" -"we may earn"',
        ddg='-"affiliate" -"sponsored" -"commission"',
    ),
    "6": FilterConfig(
        code="l",
        name="LISTICLES",
        google='-intitle:"top 10" -intitle:"top 20" -intitle:"best of" -intitle:"ultimate guide"',
        bing='NOT intitle:"top 10" NOT intitle:"best of"',
        yandex='-title:"top 10" -title:"best of"',
        ddg='-"top 10" -"best of" -"ultimate guide"',
    ),
    "7": FilterConfig(
        code="a",
        name="AI_SLOP",
        google=(
            '-"in this comprehensive guide" -"let\'s dive in" '
            '-"without further ado" -"in today\'s fast-paced world"'
        ),
        bing='NOT "let\'s dive in" NOT "comprehensive guide"',
        yandex='-"let\'s dive in" -"comprehensive guide"',
        ddg='-"let\'s dive in" -"without further ado"',
    ),
}

# Google operator -> Bing operator, applied in order.
_BING_REWRITES: tuple[tuple[str, str], ...] = (
    ("-site:", "NOT site:"),
    ("-inurl:", "NOT url:"),
    ("-intitle:", "NOT intitle:"),
    ('-"', 'NOT "'),
)


def translate_clause(clause: str, dialect: HygieneDialect) -> str:
    """
    Best-effort rewrite of a Google-style exclusion clause into another dialect.

    Only used while loading configuration; the resolver never rewrites.
    Yandex and DuckDuckGo accept the Google minus-prefix syntax as-is.
    """
    if dialect != "bing":
        return clause
    translated = clause
    for source, target in _BING_REWRITES:
        translated = translated.replace(source, target)
    return translated


def resolve_dialect(engine: str) -> HygieneDialect:
    candidate = (engine or "").lower()
    if candidate in HYGIENE_DIALECTS:
        return candidate  # type: ignore[return-value]
    return DEFAULT_DIALECT


def relaxed_filters(codes: str) -> set[str]:
    """
    Filter identifiers relaxed by the lowercase letters found anywhere in codes.

    Uppercase letters select building blocks and never relax a filter, so
    block "A" keeps the AI-slop filter active.
    """
    relaxed: set[str] = set()
    for char in codes or "":
        identifier = RELAX_CODES.get(char)
        if identifier:
            relaxed.add(identifier)
    return relaxed


def resolve_hygiene(
    codes: str,
    engine: str = DEFAULT_DIALECT,
    filters: Mapping[str, FilterConfig] | MenuConfig | None = None,
) -> str:
    """
    Return the concatenated exclusion clause for every filter not relaxed by codes.

    Unknown engines resolve against the default dialect; filters whose clause
    for the dialect is empty contribute nothing.
    """
    if isinstance(filters, MenuConfig):
        table: Mapping[str, FilterConfig] = filters.filters
    else:
        table = DEFAULT_FILTERS if filters is None else filters
    relaxed = relaxed_filters(codes)
    dialect = resolve_dialect(engine)

    exclusions: list[str] = []
    for identifier, config in table.items():
        if identifier in relaxed:
            continue
        clause = config.clause_for(dialect)
        if clause:
            exclusions.append(clause)
    return " ".join(exclusions)


__all__ = [
    "DEFAULT_DIALECT",
    "DEFAULT_FILTERS",
    "HYGIENE_DIALECTS",
    "NOISE_FILTERS",
    "RELAX_CODES",
    "relaxed_filters",
    "resolve_dialect",
    "resolve_hygiene",
    "translate_clause",
]
