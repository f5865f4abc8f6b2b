# mappings.py
import re

ANTISPAM_URL = "https://security.microsoft.com/antispam"

# first column of every policy row in the SCC list
LABEL_SELECTOR = "span.scc-list-first-column"

# Turkish and English console labels for the default connection filter policy
TARGET_LABEL_RE = re.compile(
    r"Bağlantı filtresi ilkesi.*Varsayılan|Connection filter policy.*Default",
    re.I,
)

# label -> row container, tried top to bottom
CONTAINER_STRATEGIES = [
    {"name": "details-row-automationid",
     "js": "el => el.closest('div[data-automationid=\"DetailsRow\"]')"},

    {"name": "ms-details-row",
     "js": "el => el.closest('div.ms-DetailsRow')"},

    {"name": "aria-row",
     "js": "el => el.closest('div[role=\"row\"]')"},

    # no recognizable row wrapper, fall back to the grandparent
    {"name": "grandparent",
     "js": "el => (el.parentElement && el.parentElement.parentElement) || null"},
]

# row container -> selection control, tried top to bottom
CONTROL_STRATEGIES = [
    {"name": "radio-check",
     "css": 'div[role="radio"][data-automationid="DetailsRowCheck"]'},

    {"name": "select-row-tr",
     "css": 'div[aria-label="Satır seç"][data-automationid="DetailsRowCheck"]'},

    {"name": "select-row-en",
     "css": 'div[aria-label="Select row"][data-automationid="DetailsRowCheck"]'},

    {"name": "ms-row-check",
     "css": 'div.ms-DetailsRow-check[data-automationid="DetailsRowCheck"]'},
]

# nested clickable circle inside a Fluent UI row check
INNER_CHECK_SELECTOR = ".ms-Check"

SUCCESS_SHOT = "checkbox-selected.png"
ERROR_SHOT = "checkbox-error.png"
