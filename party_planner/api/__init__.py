from .client import HttpPartyApi, PartyApi

__all__ = [
    "HttpPartyApi",
    "PartyApi",
]
