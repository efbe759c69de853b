"""WeTransfer API client."""
from .transfer_client import TransferClient

__all__ = ['TransferClient']
