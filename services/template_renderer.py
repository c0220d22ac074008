from __future__ import annotations

from models import CompanyInfo, Found, ResolutionResult
from services.domain_utils import linkedin_company_url, normalize_query


EMAIL_TEMPLATE = """Dear {addressee},

I hope this email finds you well. I came across {company}'s innovative work and was immediately drawn to your company's mission.

With my experience in [relevant field] and a proven track record of [key achievement], I believe I could be a valuable addition to your team.

I would welcome the opportunity to discuss how my background aligns with your needs and learn more about current opportunities at {company}.

Thank you for considering my interest. I look forward to your response.

Best regards,
[Your name]"""


def render_email_template(addressee: str, company: str) -> str:
    return EMAIL_TEMPLATE.format(addressee=addressee, company=company)


def render(
    query: str,
    resolution: ResolutionResult,
    linkedin_base_url: str = "https://www.linkedin.com/company/",
) -> CompanyInfo:
    """Build the CompanyInfo for a resolved contact.

    The LinkedIn URL depends only on ``query``. NotFound has nothing to render:
    callers report "no contact found" instead, so passing it here raises ValueError.
    """
    if not isinstance(resolution, Found):
        raise ValueError("render() requires a Found resolution; handle NotFound before rendering")
    record = resolution.record
    return CompanyInfo(
        hr_email=record.email,
        linkedin_url=linkedin_company_url(normalize_query(query), linkedin_base_url),
        email_template=render_email_template(record.name, record.company),
    )
