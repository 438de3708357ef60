"""
Email address helpers for the identification step.
"""

from typing import List

COMMON_EMAIL_DOMAINS = [
    "gmail.com",
    "free.fr",
    "yahoo.fr",
    "live.fr",
    "hotmail.fr",
    "outlook.fr",
    "orange.fr",
    "wanadoo.fr",
    "laposte.net",
    "sfr.fr",
]


def suggest_email_addresses(value: str) -> List[str]:
    """Complete the domain part of a partially typed address."""
    at_index = value.rfind("@")
    if at_index == -1:
        return []

    local_part = value[:at_index]
    domain_part = value[at_index + 1 :].lower()

    if not domain_part:
        return [f"{local_part}@{domain}" for domain in COMMON_EMAIL_DOMAINS]

    return [
        f"{local_part}@{domain}"
        for domain in COMMON_EMAIL_DOMAINS
        if domain.startswith(domain_part)
    ]


def complete_admin_email(value: str, domain: str = "goensol.com") -> str:
    """Pin an agent's typed address to the company domain.

    Whatever precedes the domain is kept as the local part; input with a
    foreign domain is rejected by returning an empty string.
    """
    suffix = f"@{domain}"
    if suffix in value:
        return f"{value.split(suffix)[0]}{suffix}"
    if "@" not in value:
        return f"{value}{suffix}"
    return ""
