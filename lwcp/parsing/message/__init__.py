from lwcp.parsing.message.model import Message

__all__ = ["Message"]
