"""
HTML bodies written to the CRM when a ticket is created.
"""

ADMIN_NOTE_HEADING = "Notes partagées par l'Ensolien"

_NOTE_PARAGRAPH = '<p style="margin:0;">'


def description_to_html(description: str) -> str:
    """Render the customer's description as the body of the first email."""
    return description.replace("\n", "<br>")


def build_admin_note_html(admin_email: str, notes: str) -> str:
    """Render the internal note left by an agent filling the form for a customer.

    Each line of the notes becomes its own paragraph under a highlighted
    heading naming the agent.
    """
    body = notes.replace("\n", f"</p>{_NOTE_PARAGRAPH}")
    return (
        '<div style="" dir="auto" data-top-level="true">'
        f"{_NOTE_PARAGRAPH}<strong>"
        '<span style="background-color: #FFF2CC;">'
        f"{ADMIN_NOTE_HEADING} [{admin_email}]"
        "</span></strong></p>"
        f"{_NOTE_PARAGRAPH}{body}</p><br></div>"
    )
