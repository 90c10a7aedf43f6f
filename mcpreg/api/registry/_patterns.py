"""Patterns for the registry README.

The upstream README has changed format before. Each pattern is kept here on
its own so that a format change touches one line.
"""

import re

# Leading bullet: plain dash or the older bullet glyph
BULLET = r"[-•]"

# Inline image before a label, either raw HTML or markdown
INLINE_IMAGE = r"(?:<img[^>\n]*>|!\[[^\]\n]*\]\([^)\n]*\))"

# Separator between link and description: hyphen, en dash or em dash
SEPARATOR = r"[-–—]"

# - **<img ... /> [Name](url)** - Description
# • [Name](url) – Description
SERVER_LINE_PATTERN = re.compile(
    rf"^{BULLET}[ \t]+"
    rf"(?:\*\*)?(?:{INLINE_IMAGE}[ \t]*)?(?:\*\*)?"
    rf"\[(?:{INLINE_IMAGE}[ \t]*)?([^\]\n]+)\]\(([^)\n]+)\)"
    rf"(?:\*\*)?"
    rf"(?:[ \t]*{SEPARATOR}[ \t]*(.*?))?[ \t]*$",
    re.MULTILINE,
)

# Optional emoji (or other symbol run) between the hashes and the heading text
_HEADING_MARK = r"(?:[^\w\s]+[ \t]*)?"

# ### 🎖️ Official Integrations ... up to the next heading of level 1-3
OFFICIAL_SECTION_PATTERN = re.compile(
    rf"^###[ \t]+{_HEADING_MARK}Official\b[^\n]*\n(.*?)(?=^#{{1,3}}[ \t]|\Z)",
    re.MULTILINE | re.DOTALL,
)

# Top-level heading that closes the community list: ## 📚 Resources
RESOURCES_HEADING = r"##[ \t]+(?:📚|Resources\b)"

# ### 🌎 Community Servers ... up to the next level-3 heading, the resources heading or the end
COMMUNITY_SECTION_PATTERN = re.compile(
    rf"^###[ \t]+{_HEADING_MARK}Community Servers\b[^\n]*\n(.*?)(?=^###[ \t]|^{RESOURCES_HEADING}|\Z)",
    re.MULTILINE | re.DOTALL,
)

# github.com/<owner>/<repo>
GITHUB_REPO_PATTERN = re.compile(r"github\.com/([^/\s?#]+)/([^/\s?#]+)")
