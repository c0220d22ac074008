from __future__ import annotations

import re
from typing import Optional


_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_query(query: Optional[str]) -> str:
    """Trim surrounding whitespace; case is left untouched."""
    if not query:
        return ""
    return str(query).strip()


def slugify(text: str) -> str:
    """Lower-case and replace each whitespace run with a single hyphen."""
    return _WHITESPACE_RUN.sub("-", text.strip().lower())


def linkedin_company_url(query: str, base_url: str = "https://www.linkedin.com/company/") -> str:
    if not base_url.endswith("/"):
        base_url = base_url + "/"
    return f"{base_url}{slugify(query)}"


def synthetic_hr_email(query: str) -> str:
    # e.g. "Acme Corp" -> hr@acmecorp.com
    return f"hr@{_WHITESPACE_RUN.sub('', query.lower())}.com"
