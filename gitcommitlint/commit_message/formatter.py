"""Canonical serialization of parsed commit messages."""
from ..models import CommitMessage


def format_message(message: CommitMessage) -> str:
    """Render header, body and footer separated by single blank lines.

    The result has no trailing newline. Parsing it again yields an equal
    CommitMessage.
    """
    blocks = [message.header]
    if message.body:
        blocks.append("\n".join(message.body))
    if message.footer:
        blocks.append("\n".join(str(entry) for entry in message.footer))
    return "\n\n".join(blocks)
