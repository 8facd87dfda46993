"""Page copy and user-facing messages."""
from typing import Dict, List

# Submission messages
RELAY_FALLBACK_ERROR = "Something went wrong. Please try again."
SUBMISSION_FAILED_ERROR = "Submission failed."
DISPLAY_FALLBACK_ERROR = "We couldn’t send your request. Please call us instead."
SUCCESS_NOTICE = "Thank you! We received your request and will contact you shortly."

HERO_BANNER = "⭐ Now Accepting New Clients • Free Consultation Available"
HERO_TAGLINE = (
    "With compassion and care, allowing you to thrive in your home while being taken care of."
)

SERVICES_INTRO = (
    "We also provide dialysis support and additional in-home services when needed, "
    "ensuring continuity of care and comfort at home."
)
SERVICES_DISCLAIMER = "*Services are provided based on individual care plans and assessed needs."
DIALYSIS_DISCLAIMER = (
    "*We coordinate with your clinical team; medical treatments are provided only "
    "when authorized and licensed."
)

# Cards whose wording does not depend on licensing.
FIXED_SERVICE_CARDS: List[Dict[str, str]] = [
    {
        "key": "personal",
        "title": "Personal Care",
        "text": "Assistance with bathing, dressing, grooming, and daily activities.",
    },
    {
        "key": "companion",
        "title": "Companion Care",
        "text": "Friendly companionship, meal prep, light housekeeping, and errands.",
    },
]

# Wording variants keyed by the clinical-services flag.
SUPPORT_CARD: Dict[bool, Dict[str, str]] = {
    True: {
        "title": "Skilled Support",
        "text": "Support that may include clinician-directed services based on your care plan.",
    },
    False: {
        "title": "Supportive Care",
        "text": "Medication reminders, mobility support, and safety supervision (non-medical).",
    },
}

DIALYSIS_CARD_TITLE = "Dialysis & Specialized Care"
DIALYSIS_CARD_TEXT: Dict[bool, str] = {
    True: "Support for dialysis routines and specialized needs as outlined in the care plan.",
    False: (
        "Dialysis support through scheduling help, transportation coordination, "
        "and in-home assistance with daily needs."
    ),
}

WHY_CHOOSE_US = [
    "Licensed, bonded, and insured caregivers",
    "Customized care plans",
    "24/7 support and flexible scheduling",
    "Locally owned and community-focused",
]

TESTIMONIAL = {
    "quote": "The caregivers treated my mother like family. I finally had peace of mind.",
    "attribution": "— Client Testimonial",
}

INTAKE_DISCLAIMER = (
    "*Submitting this form does not guarantee services. All care is provided based "
    "on individual care plans and assessed needs."
)
