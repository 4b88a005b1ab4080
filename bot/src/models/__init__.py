from models.base import Base
from models.message import ROLES, Message

__all__ = ["Base", "Message", "ROLES"]
