"""Deterministic copy templates - the fallback when no language model is configured.

Everything here is a pure function of the BusinessProfile: no randomness,
no clock, no I/O. Tone picks a preset that changes email and ad-headline
phrasing; the other artifacts share one voice.
"""

from .models import BusinessProfile

# Per-tone phrasing for the artifacts where tone must show
TONE_PRESETS = {
    "professional": {
        "greeting": "Hi {first_name},",
        "opener": "I'm reaching out because {business} works with {audience} in {industry}.",
        "pitch": "Our clients typically see one clear result: {offer}.",
        "pain": "Most {audience} we speak with are balancing rising costs against limited time to fix them.",
        "bump": "Following up on my earlier note in case it got buried.",
        "cta": "Would a 15-minute call next week be worthwhile?",
        "sign_off": "Best regards,",
        "subjects": (
            "{offer_short} for {audience}",
            "A question about your {industry_lower} costs",
            "Re: {offer_short}",
        ),
        "headlines": (
            "{offer} - Built for {audience}",
            "{business}: Trusted {industry} Partner",
            "The {industry} Solution {audience} Rely On",
            "See How {audience} {offer_lower}",
            "Book a Free {industry} Consultation",
        ),
    },
    "friendly": {
        "greeting": "Hey {first_name}!",
        "opener": "Hope your week's going well. I'm with {business}, and we help {audience} with {industry_lower}.",
        "pitch": "The short version? We help folks like you {offer_lower}.",
        "pain": "A lot of {audience} tell us {industry_lower} feels like one more thing on an already full plate.",
        "bump": "Just bumping this up in case it slipped past you.",
        "cta": "Up for a quick chat sometime this week?",
        "sign_off": "Cheers,",
        "subjects": (
            "Quick idea for you, {first_name}",
            "Making {industry_lower} easier",
            "Still up for a chat?",
        ),
        "headlines": (
            "Hey {audience}, {offer_lower}!",
            "{industry} Made Easy with {business}",
            "Your Friendly {industry} Team",
            "Let's {offer_lower} Together",
            "Say Hi to Simpler {industry}",
        ),
    },
    "bold": {
        "greeting": "{first_name},",
        "opener": "{audience} are leaving money on the table, and {business} fixes that.",
        "pitch": "We {offer_lower}. No fluff, no long contracts.",
        "pain": "Every month you wait on {industry_lower} is a month your competitors pull ahead.",
        "bump": "Last note from me. The results don't wait.",
        "cta": "Give me 15 minutes and I'll show you exactly how.",
        "sign_off": "Let's move,",
        "subjects": (
            "{offer_short}. Seriously.",
            "Your competitors already know this",
            "Last call: {offer_short}",
        ),
        "headlines": (
            "{offer}. Period.",
            "Stop Overpaying. Start With {business}.",
            "{audience}: Demand More From {industry}",
            "The {industry} Advantage You Can't Ignore",
            "{offer} - Or Keep Falling Behind",
        ),
    },
    "technical": {
        "greeting": "Hello {first_name},",
        "opener": "{business} delivers {industry_lower} solutions engineered for {audience}.",
        "pitch": "Measured outcome across deployments: {offer_lower}.",
        "pain": "Typical bottlenecks for {audience} are poor visibility into {industry_lower} performance and manual processes that don't scale.",
        "bump": "Re-sending the details below in case they are useful for your evaluation.",
        "cta": "Can I send over the technical spec and schedule a 20-minute walkthrough?",
        "sign_off": "Regards,",
        "subjects": (
            "{industry}: measured results for {audience}",
            "Spec sheet: {offer_short}",
            "Technical walkthrough - {business}",
        ),
        "headlines": (
            "{offer}: Measured, Not Promised",
            "Engineered {industry} for {audience}",
            "{business} - Data-Driven {industry}",
            "Specs, Benchmarks, Results: {offer_short}",
            "Integrate {industry} in Days, Not Months",
        ),
    },
}

# Sample outreach contacts; the CSV is a mail-merge starting point
SAMPLE_CONTACTS = (
    ("Jordan", "Reyes", "Head of Operations"),
    ("Taylor", "Brooks", "Procurement Manager"),
    ("Morgan", "Patel", "Owner"),
)


def _lower_first(text: str) -> str:
    """'Cut bills 30%' -> 'cut bills 30%', but leave acronyms like 'CA ...' alone."""
    if len(text) > 1 and text[0].isupper() and text[1].islower():
        return text[0].lower() + text[1:]
    return text


def _short(text: str, limit: int = 40) -> str:
    if len(text) <= limit:
        return text
    return text[:limit].rsplit(" ", 1)[0].rstrip(",.;:") + "…"


def _fields(profile: BusinessProfile, first_name: str = "{{first_name}}") -> dict[str, str]:
    offer_lower = _lower_first(profile.offer)
    return {
        "business": profile.business_name,
        "industry": profile.industry,
        "industry_lower": _lower_first(profile.industry),
        "audience": profile.target_audience,
        "offer": profile.offer,
        "offer_lower": offer_lower,
        "offer_short": _short(profile.offer),
        "first_name": first_name,
    }


def render_icp(profile: BusinessProfile) -> str:
    f = _fields(profile)
    return (
        f"Segment: {f['audience']} in the {f['industry']} space.\n"
        f"Who they are: decision makers among {f['audience']} who own budget and outcomes "
        f"for {f['industry_lower']}.\n"
        f"Pain points: rising costs, limited internal time, and no clear partner to deliver "
        f"results like \"{f['offer']}\".\n"
        f"Buying triggers: budget reviews, contract renewals, and growth or expansion plans.\n"
        f"Where to find them: industry associations, LinkedIn groups for {f['audience']}, "
        f"and {f['industry_lower']} trade events."
    )


def render_value_prop(profile: BusinessProfile) -> str:
    f = _fields(profile)
    return (
        f"{f['business']} helps {f['audience']} {f['offer_lower']} - "
        f"a focused {f['industry_lower']} partner that delivers measurable results "
        f"without adding work to your team."
    )


def _signature(profile: BusinessProfile) -> str:
    if profile.website_domain:
        return f"{profile.business_name}\n{profile.website_domain}"
    return profile.business_name


def render_emails(profile: BusinessProfile, first_name: str = "{{first_name}}") -> list[str]:
    """Three cold-email variants: direct pitch, pain angle, short follow-up."""
    preset = TONE_PRESETS[profile.tone_preset]
    f = _fields(profile, first_name)

    def fill(key: str) -> str:
        return preset[key].format(**f)

    subjects = [s.format(**f) for s in preset["subjects"]]
    signature = _signature(profile)

    direct = "\n\n".join([
        f"Subject: {subjects[0]}",
        fill("greeting"),
        f"{fill('opener')} {fill('pitch')}",
        fill("cta"),
        f"{fill('sign_off')}\n{signature}",
    ])
    pain = "\n\n".join([
        f"Subject: {subjects[1]}",
        fill("greeting"),
        fill("pain"),
        f"{fill('pitch')} {fill('cta')}",
        f"{fill('sign_off')}\n{signature}",
    ])
    bump = "\n\n".join([
        f"Subject: {subjects[2]}",
        fill("greeting"),
        f"{fill('bump')} {fill('pitch')}",
        fill("cta"),
        f"{fill('sign_off')}\n{signature}",
    ])
    return [direct, pain, bump]


def render_ad_headlines(profile: BusinessProfile) -> list[str]:
    preset = TONE_PRESETS[profile.tone_preset]
    f = _fields(profile)
    return [h.format(**f) for h in preset["headlines"]]


def render_landing(profile: BusinessProfile) -> dict:
    f = _fields(profile)
    if profile.website_domain:
        get_started = (
            f"Book a free consultation at {profile.website_domain} and see how "
            f"{f['business']} can {f['offer_lower']}."
        )
    else:
        get_started = (
            f"Book a free consultation and see how {f['business']} can {f['offer_lower']}."
        )
    return {
        "hero": f"{f['offer']}\n{f['industry']} built for {f['audience']}, by {f['business']}.",
        "sections": [
            {
                "title": "The problem",
                "body": (
                    f"{f['audience']} are under pressure to do more with less, and "
                    f"{f['industry_lower']} is often where time and money leak away."
                ),
            },
            {
                "title": "How it works",
                "body": (
                    "1. A short discovery call to understand your goals.\n"
                    "2. A tailored plan with clear milestones.\n"
                    f"3. Delivery focused on one outcome: {f['offer_lower']}."
                ),
            },
            {
                "title": f"Why {f['business']}",
                "body": (
                    f"We specialise in {f['industry_lower']} for {f['audience']}, so you get a "
                    f"partner who already knows your world."
                ),
            },
            {"title": "Get started", "body": get_started},
        ],
    }


def render_discovery_questions(profile: BusinessProfile) -> list[str]:
    f = _fields(profile)
    return [
        f"How are you handling {f['industry_lower']} today, and who owns it?",
        "What prompted you to look at this now?",
        f"If we could help you {f['offer_lower']}, what would that change for your team?",
        "What have you tried before, and what got in the way?",
        "Who else is involved in a decision like this?",
        "What timeline are you working towards?",
    ]


def render_call_script(profile: BusinessProfile) -> list[str]:
    f = _fields(profile)
    return [
        f"Intro: name, {f['business']}, and why you're calling {f['audience']} specifically.",
        "Permission: ask for 2 minutes to explain the reason for the call.",
        f"Hook: \"We help {f['audience']} {f['offer_lower']}.\"",
        "Qualify: ask two or three discovery questions and listen for pain and timing.",
        "Handle objections: acknowledge, ask a clarifying question, share a relevant result.",
        "Close: propose a specific time for a 15-minute follow-up and confirm by email.",
    ]


def render_personalized(profile: BusinessProfile) -> list[dict]:
    """One sample outreach row per email variant, ready for mail merge."""
    f = _fields(profile)
    preset = TONE_PRESETS[profile.tone_preset]
    rows = []
    for i, (first, last, title) in enumerate(SAMPLE_CONTACTS):
        emails = render_emails(profile, first_name=first)
        rows.append({
            "company": f"{profile.business_name} prospect {i + 1}",
            "contactName": f"{first} {last}",
            "title": title,
            "email": f"{first.lower()}.{last.lower()}@example.com",
            "personalizedIntro": (
                f"{first}, as {title.lower()} for one of the {f['audience']} we work with, "
                f"you're likely looking for ways to {f['offer_lower']}."
            ),
            "emailVariant": emails[i % len(emails)],
            "cta": preset["cta"],
        })
    return rows


def render_bundle(profile: BusinessProfile) -> dict:
    """Render every artifact into the camelCase bundle shape."""
    return {
        "icp": render_icp(profile),
        "valueProp": render_value_prop(profile),
        "emails": render_emails(profile),
        "adHeadlines": render_ad_headlines(profile),
        "landing": render_landing(profile),
        "discoveryQuestions": render_discovery_questions(profile),
        "callScriptBullets": render_call_script(profile),
        "personalized": render_personalized(profile),
    }
