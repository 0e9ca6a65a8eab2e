"""Rule-based content flagging service."""
