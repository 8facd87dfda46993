"""HTML rendering for the single marketing page."""
from datetime import datetime, timezone
from html import escape
from typing import List, Optional

from homecare_site.schemas import (
    ErrorState,
    IdleState,
    IntakeFields,
    SendingState,
    SiteConfig,
    SubmissionState,
    SuccessState,
)
from homecare_site.utils.constants import (
    DIALYSIS_CARD_TEXT,
    DIALYSIS_CARD_TITLE,
    DIALYSIS_DISCLAIMER,
    DISPLAY_FALLBACK_ERROR,
    FIXED_SERVICE_CARDS,
    HERO_BANNER,
    HERO_TAGLINE,
    INTAKE_DISCLAIMER,
    SERVICES_DISCLAIMER,
    SERVICES_INTRO,
    SUCCESS_NOTICE,
    SUPPORT_CARD,
    TESTIMONIAL,
    WHY_CHOOSE_US,
)

STYLE = """
body { margin: 0; font-family: system-ui, sans-serif; background: #f9fafb; color: #1f2937; }
section { padding: 4rem 1.5rem; }
.hero, footer { background: #2563eb; color: #fff; text-align: center; }
.banner { display: inline-block; background: rgba(255,255,255,.2); padding: .5rem 1rem; border-radius: 9999px; }
.cards { display: grid; grid-template-columns: repeat(auto-fit, minmax(220px, 1fr)); gap: 1.5rem; }
.card { background: #fff; border-radius: 1rem; padding: 1.5rem; box-shadow: 0 1px 2px rgba(0,0,0,.08); }
.note { font-size: .8rem; color: #6b7280; }
.success { color: #15803d; }
.error { color: #b91c1c; }
"""


def _call_link(config: SiteConfig) -> str:
    label = escape(f"Call {config.business_name} at {config.display_phone}")
    return (
        f'<a class="call" href="{escape(config.tel_href)}" aria-label="{label}">'
        f"Call {escape(config.display_phone)}</a>"
    )


def _card(key: str, title: str, text: str, extra: str = "") -> str:
    return (
        f'<div class="card" data-card="{key}">'
        f"<h3>{escape(title)}</h3><p>{escape(text)}</p>{extra}</div>"
    )


def _hero(config: SiteConfig) -> str:
    return f"""<section class="hero">
<div class="banner">{escape(HERO_BANNER)}</div>
<h1>{escape(config.business_name)}</h1>
<p>{escape(HERO_TAGLINE)}</p>
<a class="consult" href="#contact" aria-label="Request a free consultation">Request a Free Consultation</a>
{_call_link(config)}
</section>"""


def service_cards(config: SiteConfig) -> List[str]:
    """Service cards; only the support and dialysis wording follow the clinical flag."""
    clinical = config.skilled_clinical_services
    cards = [_card(c["key"], c["title"], c["text"]) for c in FIXED_SERVICE_CARDS]
    support = SUPPORT_CARD[clinical]
    cards.append(_card("support", support["title"], support["text"]))
    cards.append(
        _card(
            "dialysis",
            DIALYSIS_CARD_TITLE,
            DIALYSIS_CARD_TEXT[clinical],
            f'<p class="note">{escape(DIALYSIS_DISCLAIMER)}</p>',
        )
    )
    return cards


def _services(config: SiteConfig) -> str:
    return f"""<section class="services">
<h2>Our Home Care Services</h2>
<p>{escape(SERVICES_INTRO)}</p>
<p class="note">{escape(SERVICES_DISCLAIMER)}</p>
<div class="cards">
{"".join(service_cards(config))}
</div>
</section>"""


def _why_us() -> str:
    items = "".join(f"<li>{escape(item)}</li>" for item in WHY_CHOOSE_US)
    return f"""<section class="why-us">
<h2>Why Families Choose Us</h2>
<ul>{items}</ul>
<blockquote class="testimonial"><p>"{escape(TESTIMONIAL["quote"])}"</p>
<p>{escape(TESTIMONIAL["attribution"])}</p></blockquote>
</section>"""


def _status_notice(state: SubmissionState) -> str:
    if isinstance(state, SuccessState):
        return f'<p class="success" role="status">{escape(SUCCESS_NOTICE)}</p>'
    if isinstance(state, ErrorState):
        message = state.message or DISPLAY_FALLBACK_ERROR
        return f'<p class="error" role="alert">{escape(message)}</p>'
    return ""


def _intake_form(config: SiteConfig, state: SubmissionState, fields: IntakeFields) -> str:
    sending = isinstance(state, SendingState)
    button = (
        '<button type="submit" disabled>Sending...</button>'
        if sending
        else '<button type="submit">Submit Intake Request</button>'
    )
    # The button is disabled as soon as the browser submits the form.
    on_submit = "this.querySelector('button[type=submit]').disabled=true"
    return f"""<form class="intake" action="/intake" method="POST" onsubmit="{on_submit}">
<input type="hidden" name="_subject" value="{escape(config.intake_subject)}">
<label>Client / Family Name
<input name="name" type="text" placeholder="Full name" value="{escape(fields.name)}" required></label>
<label>Phone Number
<input name="phone" type="tel" placeholder="(###) ###-####" value="{escape(fields.phone)}" required></label>
<label>Email (optional)
<input name="email" type="email" placeholder="you@example.com" value="{escape(fields.email)}"></label>
<label>Care Needs
<textarea name="message" placeholder="Tell us what kind of support is needed (personal care, companion care, dialysis support, etc.)">{escape(fields.message)}</textarea></label>
<p class="note">{escape(INTAKE_DISCLAIMER)}</p>
{button}
{_status_notice(state)}
</form>"""


def _contact(config: SiteConfig, state: SubmissionState, fields: IntakeFields) -> str:
    return f"""<section id="contact" class="contact">
<h2>Get Started Today</h2>
<p>Call us or request a consultation to discuss your care needs.</p>
<p class="note">New clients can also complete a quick intake request below.</p>
<div class="cards">
<div class="card call-card">
<h3>Call for Immediate Help</h3>
<p>Speak with our team to discuss care options, scheduling, and next steps.</p>
{_call_link(config)}
</div>
<div class="card">
<h3>Client Intake Request Form</h3>
{_intake_form(config, state, fields)}
</div>
</div>
</section>"""


def render_page(
    config: SiteConfig,
    state: Optional[SubmissionState] = None,
    fields: Optional[IntakeFields] = None,
    year: Optional[int] = None,
) -> str:
    """Render the full HTML document for the given configuration and form state."""
    state = state or IdleState()
    fields = fields or IntakeFields()
    year = year or datetime.now(timezone.utc).year
    name = escape(config.business_name)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{name}</title>
<style>{STYLE}</style>
</head>
<body>
{_hero(config)}
{_services(config)}
{_why_us()}
{_contact(config, state, fields)}
<footer><p>© {year} {name}. All rights reserved.</p></footer>
</body>
</html>
"""
