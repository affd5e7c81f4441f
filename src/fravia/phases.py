"""Static phase catalog: building blocks, precombinations and engine nuances per phase.

Templates use ``<N>`` placeholders for topic N (``<0>`` is the primary
topic). Precombination codes live in the same letter space as building blocks
but never collide with them inside a phase.
"""

from __future__ import annotations

from .filters import NOISE_FILTERS
from .models import BuildingBlock, PhaseInfo, PhaseMenu, Precombination


def _block(code: str, name: str, description: str, **engines: list[str]) -> BuildingBlock:
    return BuildingBlock(code=code, name=name, description=description, engines=engines)


def _combo(code: str, name: str, expands_to: str, description: str) -> Precombination:
    return Precombination(
        code=code, name=name, expands_to=list(expands_to), description=description
    )


PHASES: tuple[PhaseInfo, ...] = (
    PhaseInfo(id="S1", name="Reconnaissance", purpose="Map vocabulary, key actors, obvious authority and garbage"),
    PhaseInfo(id="S2", name="Surface Scan", purpose="Clean, high-signal overview of known information"),
    PhaseInfo(id="S3", name="Deep Documents", purpose="Extract PDFs, XLS, technical artifacts"),
    PhaseInfo(id="S4", name="Structural Mapping", purpose="APIs, subdomains, infrastructure discovery"),
    PhaseInfo(id="S5", name="Filtered High-Signal", purpose="Maximum filter strictness, authority sources only"),
    PhaseInfo(id="S6", name="Negative-Space", purpose="Failures, contradictions, what's missing"),
    PhaseInfo(id="S7", name="Temporal Evolution", purpose="Historical analysis, time-bounded searches"),
    PhaseInfo(id="S8", name="Language/Regional Lateral", purpose="Cross-language, regional engine exploration"),
)


_PHASE_MENUS: dict[int, dict] = {
    1: {
        "id": "S1",
        "name": "Reconnaissance",
        "purpose": "Map vocabulary, key actors, obvious authority and obvious garbage around the topic.",
        "building_blocks": [
            _block(
                "A",
                "Broad term+synonym sweep",
                "Use topic + all synonyms to discover how the web names this thing.",
                google=['"<0>" OR "<1>" OR "<2>"'],
                bing=['"<0>" OR "<1>" OR "<2>"'],
                yandex=['"<0>" | "<1>" | "<2>"'],
            ),
            _block(
                "B",
                "Term + context word",
                "Pair main subject with generic context (overview, definition) to bias intros.",
                google=['"<0>" "overview"', '"<0>" "definition"'],
                bing=['"<0>" "introduction"'],
                yandex=['"<0>" & "what is"'],
            ),
            _block(
                "C",
                "Entity co-mention",
                "Find entities that appear near your subject to identify linked products/companies.",
                google=['"<0>" AROUND(8) "cloud"', '"<0>" AROUND(8) "GPU"'],
                bing=['"<0>" near:8 "server"'],
                yandex=['"<0>" /5 "technology"'],
            ),
        ],
        "precombinations": [
            _combo("X", "Standard Recon Combo", "AB", "Broad sweep + definition focus"),
            _combo("Y", "Infra-tinged Recon", "AC", "Broad sweep + entity co-mentions"),
        ],
        "engine_nuances": {
            "google": "G: Text & entity co-occurrence. AROUND(n) for concept binding. High SEO noise at reconnaissance.",
            "bing": "G: Alternate view of same space. May surface smaller or regional sites Google buries.",
            "yandex": "G: Early hint of regional (RU/CIS) coverage. Structural TLD distribution.",
        },
    },
    2: {
        "id": "S2",
        "name": "Surface Scan",
        "purpose": "Obtain a clean, higher-signal overview of what is known about the topic.",
        "building_blocks": [
            _block(
                "A",
                "Authority overview (edu/gov/org)",
                "Bias towards official or academic overview material.",
                google=['"<0>" overview OR introduction (site:edu OR site:gov OR site:org)'],
                bing=['"<0>" (overview OR definition) (site:edu OR site:gov OR site:org)'],
                yandex=['"<0>" & (overview | introduction) (site:*.edu | site:*.gov)'],
            ),
            _block(
                "B",
                "Current state / recent developments",
                "Emphasize recency to see what has changed lately.",
                google=['"<0>" "current state" OR "recent developments" after:2023-01-01'],
                bing=['"<0>" "recent" OR "latest" language:en'],
                yandex=['"<0>" date:>20230101'],
            ),
            _block(
                "C",
                "Practice & usage",
                "How the topic is used in the field (developer docs, guides).",
                google=['"<0>" "developer guide" OR "getting started"'],
                bing=['"<0>" "documentation" (site:docs.* OR site:developer.*)'],
                yandex=['"<0>" & (documentation | guide) domain:com'],
            ),
        ],
        "precombinations": [
            _combo("X", "Balanced Surface Overview", "AC", "Authority + practical usage"),
            _combo("Y", "Recency-Biased Overview", "AB", "Authority + recent focus"),
        ],
        "engine_nuances": {
            "google": "G: Will tend to show polished explainers and official docs first once noise is suppressed.",
            "bing": "G: Good for finding Microsoft/industry whitepapers or niche docs that Google buries.",
            "yandex": "G: Useful to see whether there is a significant non-English body of overview material.",
        },
    },
    3: {
        "id": "S3",
        "name": "Deep Documents",
        "purpose": "Extract non-HTML artifacts: PDFs, spreadsheets, presentations, data files.",
        "building_blocks": [
            _block(
                "A",
                "PDF Extraction (All Engines)",
                "Find PDF documents across all engines.",
                google=['"<0>" filetype:pdf'],
                bing=['"<0>" contains:pdf'],
                yandex=['"<0>" mime:pdf'],
            ),
            _block(
                "B",
                "Data/Config Files (XLS/JSON)",
                "Find spreadsheets, data files, configuration files.",
                google=['"<0>" (filetype:xls OR filetype:xlsx OR filetype:json)'],
                bing=['"<0>" contains:xlsx'],
                yandex=['"<0>" (mime:xls | mime:json)'],
            ),
            _block(
                "C",
                "Academic PDFs Only",
                "PDFs from academic sources.",
                google=['"<0>" filetype:pdf site:edu'],
                bing=['"<0>" contains:pdf site:edu'],
                yandex=['"<0>" mime:pdf site:*.edu'],
            ),
            _block(
                "D",
                "Presentations",
                "PowerPoint and presentation files.",
                google=['"<0>" (filetype:ppt OR filetype:pptx)'],
                bing=['"<0>" contains:pptx'],
                yandex=['"<0>" mime:ppt'],
            ),
        ],
        "precombinations": [
            _combo("X", "Full Document Sweep", "ABD", "All document types"),
            _combo("Y", "Academic Focus", "AC", "PDFs with academic bias"),
        ],
        "engine_nuances": {
            "google": "G: Text inside PDF searchable. filetype: operator.",
            "bing": "G: contains: finds pages hosting files.",
            "yandex": "G: mime: for raw file type matching.",
        },
    },
    4: {
        "id": "S4",
        "name": "Structural Mapping",
        "purpose": "Map digital layout: APIs, subdomains, infrastructure.",
        "building_blocks": [
            _block(
                "A",
                "Subdomain Map",
                "Discover subdomains of target domain.",
                yandex=["rhost:com.<0>.*"],
                bing=["site:<0>"],
                google=["site:*.<0>"],
            ),
            _block(
                "B",
                "API/Docs Discovery",
                "Find API documentation and developer resources.",
                google=["site:<0> inurl:api OR inurl:docs"],
                bing=["site:<0> inurl:api"],
                yandex=["site:<0> & (api | docs)"],
            ),
            _block(
                "C",
                "Directory Listings",
                "Find exposed directory listings.",
                google=['intitle:"index of" "<0>"'],
                bing=['intitle:"index of" "<0>"'],
                yandex=['title:"index of" "<0>"'],
            ),
        ],
        "precombinations": [
            _combo("X", "Infrastructure Sweep", "AB", "Subdomains + APIs"),
        ],
        "engine_nuances": {
            "bing": "G: ip: finds neighbors on same IP.",
            "yandex": "G: rhost: reverse host for subdomain discovery.",
            "google": "G: site:*.domain for wildcard subdomain.",
        },
    },
    5: {
        "id": "S5",
        "name": "Filtered High-Signal",
        "purpose": "Maximum filter strictness, authority sources only.",
        "building_blocks": [
            _block(
                "A",
                "Academic Authority Lock",
                "Only .edu, .ac.*, research institutions.",
                google=['"<0>" (site:edu OR site:ac.* OR site:arxiv.org OR site:researchgate.net)'],
                bing=['"<0>" (site:edu OR site:ac.*)'],
                yandex=['"<0>" (site:*.edu | site:*.ac.*)'],
            ),
            _block(
                "B",
                "Government Authority Lock",
                "Only .gov, .mil, official government sources.",
                google=['"<0>" (site:gov OR site:gov.* OR site:mil)'],
                bing=['"<0>" (site:gov OR site:gov.*)'],
                yandex=['"<0>" (site:*.gov | site:*.mil)'],
            ),
            _block(
                "C",
                "Technical Authority Lock",
                "GitHub, StackOverflow, official docs.",
                google=['"<0>" (site:github.com OR site:stackoverflow.com OR site:developer.*)'],
                bing=['"<0>" (site:github.com OR site:stackoverflow.com)'],
                yandex=['"<0>" (site:github.com | site:stackoverflow.com)'],
            ),
        ],
        "precombinations": [
            _combo("X", "All Authority", "ABC", "Academic + Gov + Tech"),
        ],
        "engine_nuances": {
            "google": "G: Combine with date filters for authoritative recent.",
            "bing": "G: prefer: boosts but doesn't exclude.",
            "yandex": "G: domain: for TLD-only filtering.",
        },
    },
    6: {
        "id": "S6",
        "name": "Negative-Space",
        "purpose": "Find failures, contradictions, criticism, what is missing.",
        "building_blocks": [
            _block(
                "A",
                "Failure/Problem Search",
                "Find discussions of problems, failures, issues.",
                google=['"<0>" (failed OR failure OR problem OR issue OR bug)'],
                bing=['"<0>" (problem OR issue OR failure)'],
                yandex=['"<0>" & (problem | failure | bug)'],
            ),
            _block(
                "B",
                "Criticism/Controversy",
                "Find critical perspectives and controversies.",
                google=['"<0>" (criticism OR controversy OR debate OR questioned)'],
                bing=['"<0>" (criticism OR controversy)'],
                yandex=['"<0>" & (criticism | controversy)'],
            ),
            _block(
                "C",
                "Exclude Dominant Sources",
                "Find obscure sources by excluding major ones.",
                google=['"<0>" -site:wikipedia.org -site:britannica.com -site:medium.com'],
                bing=['"<0>" NOT site:wikipedia.org NOT site:medium.com'],
                yandex=['"<0>" -site:wikipedia.org -site:medium.com'],
            ),
        ],
        "precombinations": [
            _combo("X", "Full Negative Space", "ABC", "Problems + Criticism + Obscure"),
        ],
        "engine_nuances": {
            "google": "G: AROUND(n) to find terms near 'problem' or 'failure'.",
            "bing": "G: NOT for exclusion, near: for proximity.",
            "yandex": "G: - prefix for exclusion.",
        },
    },
    7: {
        "id": "S7",
        "name": "Temporal Evolution",
        "purpose": "Historical analysis, time-bounded searches, evolution of topic.",
        "building_blocks": [
            _block(
                "A",
                "Recent Only (Last Year)",
                "Content from the last year only.",
                google=['"<0>" after:2024-01-01'],
                # Bing has no date operator; apply the freshness filter in the UI.
                bing=['"<0>"'],
                yandex=['"<0>" date:>20240101'],
            ),
            _block(
                "B",
                "Historical (Pre-2020)",
                "Older content before recent hype cycles.",
                google=['"<0>" before:2020-01-01'],
                bing=['"<0>"'],
                yandex=['"<0>" date:<20200101'],
            ),
            _block(
                "C",
                "Wayback Machine",
                "Search Internet Archive for historical snapshots.",
                archive=["<0>"],
                google=['site:web.archive.org "<0>"'],
            ),
        ],
        "precombinations": [
            _combo("X", "Time Contrast", "AB", "Compare recent vs historical"),
        ],
        "engine_nuances": {
            "google": "G: before:/after: for date filtering.",
            "bing": "G: Use freshness parameter in API.",
            "yandex": "G: date: with comparison operators.",
            "archive": "G: CDX API for programmatic access.",
        },
    },
    8: {
        "id": "S8",
        "name": "Language/Regional Lateral",
        "purpose": "Cross-language exploration, regional engines, non-English sources.",
        "building_blocks": [
            _block(
                "A",
                "Russian/CIS Sources",
                "Search Russian-language and CIS region sources.",
                yandex=['"<0>" lang:ru', '"<0>" domain:ru'],
                google=['"<0>" site:ru'],
            ),
            _block(
                "B",
                "Chinese Sources",
                "Search Chinese-language sources.",
                baidu=['"<0>"'],
                google=['"<0>" site:cn'],
            ),
            _block(
                "C",
                "European Sources",
                "Search European language sources.",
                google=['"<0>" (site:de OR site:fr OR site:es OR site:it)'],
                yandex=['"<0>" (domain:de | domain:fr | domain:es)'],
            ),
            _block(
                "D",
                "Academic Cross-Language",
                "Academic sources in multiple languages.",
                google=['"<0>" (site:edu.* OR site:ac.* OR site:uni-*)'],
                scholar=['"<0>"'],
            ),
        ],
        "precombinations": [
            _combo("X", "Global Sweep", "ABC", "All regional sources"),
            _combo("Y", "Academic Global", "AD", "Russian + Academic"),
        ],
        "engine_nuances": {
            "yandex": "G: Strongest for Russian/CIS, lang: and domain: operators.",
            "baidu": "G: Required for Chinese sources, different operator syntax.",
            "google": "G: site:TLD for regional filtering.",
            "scholar": "G: Cross-language academic search.",
        },
    },
}


def phase_info(phase: int) -> PhaseInfo | None:
    if 1 <= phase <= len(PHASES):
        return PHASES[phase - 1]
    return None


def get_phase_menu(phase: int) -> PhaseMenu:
    """
    Return the full menu for a phase.

    Phases without a configured menu never fail: they get their identity from
    PHASES when available (placeholder text otherwise) and empty block,
    precombination and nuance tables.
    """
    data = _PHASE_MENUS.get(phase)
    if data is None:
        info = phase_info(phase)
        return PhaseMenu(
            phase=phase,
            id=f"S{phase}",
            name=info.name if info else "Unknown",
            purpose=info.purpose if info else "Not defined",
            noise_filters=list(NOISE_FILTERS),
        )
    return PhaseMenu(phase=phase, noise_filters=list(NOISE_FILTERS), **data)


__all__ = ["PHASES", "get_phase_menu", "phase_info"]
