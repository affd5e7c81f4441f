# """Handbook prompt text for the menu-ordering protocol.
# Exposed by the MCP host as the fravia_handbook prompt.
# """

HANDBOOK = r"""
# Fravia MCP Handbook (menu-ordering search)

**Goal**
Run a disciplined, multi-phase web investigation without writing raw search
syntax. The agent *orders from a menu*: it picks letter codes, and the server
expands them into engine-specific queries with noise suppression applied.

> Notes
> - The server never writes free-form queries for you; every query comes from
>   a building block template in the current phase's menu.
> - Noise filters are **on by default**. You relax them explicitly, per call.
> - Calls are stateless. Pass the phase, topics and codes every time.

---

## 1. Protocol

1. `fravia_get_index()` lists the eight phases (S1-S8).
2. `fravia_get_menu(phase=N)` shows building blocks, precombinations,
   active hygiene filters and engine nuances for phase N.
3. `fravia_execute(phase=N, topics=[...], codes='...')` builds the queries
   and returns an execution plan (browser navigation steps or API requests).
4. `fravia_stop(continue_to_phase=M, reason='...')` closes a phase and either
   hands over to phase M or ends the session.

## 2. Codes

- Uppercase letters select **building blocks** (`A`, `B`, `C`, ...) or
  **precombinations** (`X`, `Y`, ...). A precombination expands to a fixed
  set of blocks, so `X` in S1 is the same as `AB`.
- Lowercase letters **relax** a noise filter for this call only:

  | letter | filter               |
  |--------|----------------------|
  | s      | Social/Forum         |
  | f      | Free Hosting/Blogs   |
  | t      | Spam TLDs            |
  | u      | Structural Cruft     |
  | c      | Commercial/Affiliate |
  | l      | Clickbait/Listicles  |
  | a      | Generic AI Slop      |

- Everything else (spaces, digits, punctuation) is ignored, and order does
  not matter: `'s AC'`, `'CAs'` and `'A,C s'` are the same order.

## 3. Topics

- `topics[0]` is the main subject; `topics[1:]` are synonyms or alternates.
- Templates reference topics as `<0>`, `<1>`, ...; a template slot with no
  matching topic is filled with the main subject.
- One query variant is produced per topic, and identical queries are
  collapsed, so adding synonyms never yields duplicate work.

## 4. Phases

| phase | name                      | use it to                                        |
|-------|---------------------------|--------------------------------------------------|
| S1    | Reconnaissance            | map vocabulary, actors, obvious authority/garbage |
| S2    | Surface Scan              | get a clean overview of what is known            |
| S3    | Deep Documents            | pull PDFs, spreadsheets, presentations           |
| S4    | Structural Mapping        | find subdomains, APIs, directory listings        |
| S5    | Filtered High-Signal      | lock onto academic / government / technical sources |
| S6    | Negative-Space            | look for failures, criticism, what is missing    |
| S7    | Temporal Evolution        | contrast recent and historical material          |
| S8    | Language/Regional Lateral | move across languages and regional engines       |

Work through the phases in order unless the investigation clearly calls for
a jump; S5 and S6 are the usual places to tighten or widen the net.
"""
